"""Error kinds raised by the generation engine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


class GosproutError(Exception):
    """Base class for every fatal gosprout error."""


class AlreadyExistsError(GosproutError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' already exists.")


class UnknownModeError(GosproutError):
    """
    The mode token is neither a built-in mode nor a registered template.

    Attributes:
        token: The mode token that failed to resolve.
        known: Sorted names of the templates that were available.
    """

    def __init__(self, token: str, known: Sequence[str]) -> None:
        self.token = token
        self.known = list(known)
        super().__init__(f"Unknown mode or template '{token}'.")


class ConfigDecodeError(GosproutError):
    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse {path}: {cause}")


class TemplateModeError(GosproutError):
    """A template declares a base mode other than ``simple`` or ``project``."""

    def __init__(self, template: str, mode: str) -> None:
        self.template = template
        self.mode = mode
        super().__init__(
            f"Template '{template}' has invalid base mode {mode!r}; "
            "expected 'simple' or 'project'."
        )


class TemplatePathError(GosproutError):
    """A template directory or file path climbs out of the project root."""

    def __init__(self, template: str, path: str) -> None:
        self.template = template
        self.path = path
        super().__init__(f"Template '{template}' path {path!r} leaves the project directory.")


class DirectoryCreateError(GosproutError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create directory {path}: {cause}")


class FileWriteError(GosproutError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class ModuleInitError(GosproutError):
    def __init__(self, root: Path, detail: str) -> None:
        self.root = root
        self.detail = detail
        super().__init__(f"Failed to initialize go.mod in {root}: {detail}")


class InvalidProjectNameError(GosproutError):
    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid project name {name!r}: {reason}")


@dataclass(frozen=True)
class VersionControlInitWarning:
    """
    Soft failure of the version-control initializer.

    Returned alongside a successful generation instead of being raised.
    """

    root: Path
    detail: str

    def __str__(self) -> str:
        return f"Failed to initialize git in {self.root}: {self.detail}"
