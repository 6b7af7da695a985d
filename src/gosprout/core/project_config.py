"""Render the ``.gosprout.toml`` file of a templated project."""

from __future__ import annotations

from collections.abc import Mapping
import json
import re

from gosprout.core.registry import TemplateDefinition
from gosprout.core.types import Mode

PROJECT_CONFIG_FILENAME = ".gosprout.toml"
BUILD_OUTPUT_DIR = "bin"

DEFAULT_COMMANDS: dict[str, str] = {
    "vet": "go vet ./...",
    "fmt": "go fmt ./...",
    "test": "go test -v ./...",
}

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def build_command_set(template: TemplateDefinition | None) -> dict[str, str]:
    """Built-in commands overlaid with the template's; template entries win."""
    commands = dict(DEFAULT_COMMANDS)
    if template is not None:
        commands.update(template.commands)
    return commands


def _toml_string(value: str) -> str:
    # JSON escapes are a subset of TOML basic-string escapes, except DEL.
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


def _toml_key(key: str) -> str:
    return key if _BARE_KEY.match(key) else _toml_string(key)


def _commands_section(commands: Mapping[str, str]) -> str:
    return "".join(
        f"{_toml_key(name)} = {_toml_string(commands[name])}\n" for name in sorted(commands)
    )


def render_project_config(project_name: str, mode: Mode, commands: Mapping[str, str]) -> str:
    """Generate the project-local configuration text.

    Commands are written sorted by name so the output is deterministic.
    """
    return f"""\
# gosprout project configuration

[project]
# "simple" (single main package) or "project" (standard layout)
mode = {_toml_string(mode.value)}

# Project name, defaults to the directory name when empty
name = {_toml_string(project_name)}

[build]
# Build entry, relative to the project root
entry = {_toml_string(mode.entry)}

# Output directory
output = {_toml_string(BUILD_OUTPUT_DIR)}

# Extra ldflags appended to the profile ldflags, e.g. "-X main.version=1.0.0"
ldflags = ""

# Build tags
# tags = ["jsoniter"]

# Extra environment variables
# extra_env = ["GOPROXY=https://proxy.golang.org"]

[run]
# Run entry, empty means build.entry
entry = ""

# Default arguments
# args = ["-config", "config.yaml"]

# Debug profile (default build)
# [profile.debug]
# ldflags = ""
# gcflags = "all=-N -l"     # disable optimizations for debuggers
# trimpath = false
# cgo_enabled = true
# race = false

# Release profile (build --release)
# [profile.release]
# ldflags = "-s -w"         # strip symbol table and DWARF
# trimpath = true           # remove file system paths from the binary
# cgo_enabled = false       # static binary
# race = false

# Custom commands, run from the project root
# name = "shell command"
[commands]
{_commands_section(commands)}"""
