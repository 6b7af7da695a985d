"""Resolve a ``--mode`` token to a built-in layout or a registered template."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gosprout.core.errors import UnknownModeError
from gosprout.core.registry import TemplateDefinition, TemplateRegistry, load_registry
from gosprout.core.types import Mode


@dataclass(frozen=True)
class BuiltinMode:
    mode: Mode

    @property
    def base(self) -> Mode:
        return self.mode

    @property
    def template(self) -> None:
        return None


@dataclass(frozen=True)
class TemplatedMode:
    template: TemplateDefinition

    @property
    def base(self) -> Mode:
        """Base layout of the template; raises ``TemplateModeError`` if invalid."""
        return self.template.base_mode


ResolvedMode = BuiltinMode | TemplatedMode


def resolve_mode(
    token: str = Mode.SIMPLE.value,
    registry: TemplateRegistry | None = None,
    *,
    config_path: Path | None = None,
) -> ResolvedMode:
    """
    Classify *token* as a built-in mode or a template from *registry*.

    Built-in names win over identically named templates. The registry is only
    loaded from *config_path* when the token is not built-in and no registry
    was given, so a broken global config never blocks the built-in modes.

    Raises:
        UnknownModeError: If the token names neither a built-in nor a template.
        ConfigDecodeError: If the registry has to be loaded and fails to decode.
    """
    builtin = Mode.parse(token)
    if builtin is not None:
        return BuiltinMode(builtin)

    if registry is None:
        registry = load_registry(config_path)

    template = registry.lookup(token)
    if template is None:
        raise UnknownModeError(token, registry.names())
    return TemplatedMode(template)
