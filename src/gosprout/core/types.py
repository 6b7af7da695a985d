"""Built-in project modes."""

from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    """Built-in scaffold layouts."""

    SIMPLE = "simple"
    PROJECT = "project"

    @property
    def label(self) -> str:
        labels: dict[Mode, str] = {
            Mode.SIMPLE: "Simple",
            Mode.PROJECT: "Project",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[Mode, str] = {
            Mode.SIMPLE: "Single main.go at the module root. Good for small tools.",
            Mode.PROJECT: "Standard layout with cmd/server, internal/, pkg/ and test/.",
        }
        return descriptions[self]

    @property
    def entry(self) -> str:
        """Build entry path, relative to the project root."""
        # Must match the directory that holds main.go in the scaffold layout.
        entries: dict[Mode, str] = {
            Mode.SIMPLE: ".",
            Mode.PROJECT: "cmd/server",
        }
        return entries[self]

    @classmethod
    def parse(cls, token: str) -> Mode | None:
        """Return the built-in mode named exactly *token*, if any."""
        for mode in cls:
            if mode.value == token:
                return mode
        return None
