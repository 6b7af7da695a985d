"""User-level template registry loaded from ``~/.gosprout/config.toml``."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from types import MappingProxyType
from typing import Any

from gosprout.core.errors import ConfigDecodeError, FileWriteError, TemplateModeError
from gosprout.core.types import Mode
from gosprout.templates import global_config_toml

GLOBAL_CONFIG_DIR = ".gosprout"
GLOBAL_CONFIG_FILENAME = "config.toml"
DEFAULT_LICENSE = "MIT"


def global_config_dir(home: Path | None = None) -> Path:
    return (home if home is not None else Path.home()) / GLOBAL_CONFIG_DIR


def global_config_path(home: Path | None = None) -> Path:
    return global_config_dir(home) / GLOBAL_CONFIG_FILENAME


@dataclass(frozen=True, kw_only=True)
class BuildSettings:
    """
    Build overrides declared by a template.

    Part of the config schema; project generation does not consume them.
    """

    entry: str = ""
    output: str = ""
    ldflags: str = ""
    tags: tuple[str, ...] = ()
    extra_env: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class RunSettings:
    """Run overrides declared by a template. Unused by generation."""

    entry: str = ""
    args: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class TemplateDefinition:
    """
    A named project template.

    Attributes:
        name: Registry key, case-sensitive.
        description: Free text shown in listings.
        mode: Base mode name. Validated only when the template is used.
        dirs: Extra directories created under the project root.
        files: Extra files, relative path to literal content.
        commands: Custom commands merged over the built-in command set.
        build: Build sub-table.
        run: Run sub-table.
    """

    name: str
    description: str = ""
    mode: str = Mode.SIMPLE.value
    dirs: tuple[str, ...] = ()
    files: Mapping[str, str] = field(default_factory=dict)
    commands: Mapping[str, str] = field(default_factory=dict)
    build: BuildSettings = field(default_factory=BuildSettings)
    run: RunSettings = field(default_factory=RunSettings)

    @property
    def base_mode(self) -> Mode:
        mode = Mode.parse(self.mode)
        if mode is None:
            raise TemplateModeError(self.name, self.mode)
        return mode


@dataclass(frozen=True, kw_only=True)
class Defaults:
    author: str = ""
    license: str = DEFAULT_LICENSE


@dataclass(frozen=True, kw_only=True)
class TemplateRegistry:
    """
    Read-only set of templates plus user defaults.

    Template iteration order is not part of the contract: anything shown to
    the user goes through :meth:`names`, which sorts.
    """

    templates: Mapping[str, TemplateDefinition] = field(default_factory=dict)
    defaults: Defaults = field(default_factory=Defaults)
    path: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "templates", MappingProxyType(dict(self.templates)))

    def lookup(self, name: str) -> TemplateDefinition | None:
        return self.templates.get(name)

    def list_all(self) -> Mapping[str, TemplateDefinition]:
        return self.templates

    def names(self) -> list[str]:
        return sorted(self.templates)

    def __len__(self) -> int:
        return len(self.templates)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


_KIND_NAMES: dict[type, str] = {str: "string", list: "array", dict: "table"}


def _expect(value: Any, kind: type, where: str) -> Any:
    if not isinstance(value, kind):
        raise TypeError(f"{where} must be a {_KIND_NAMES[kind]}, got {type(value).__name__}")
    return value


def _str_list(value: Any, where: str) -> tuple[str, ...]:
    items = _expect(value, list, where)
    return tuple(_expect(item, str, f"{where}[{i}]") for i, item in enumerate(items))


def _str_table(value: Any, where: str) -> dict[str, str]:
    table = _expect(value, dict, where)
    return {key: _expect(item, str, f"{where}.{key}") for key, item in table.items()}


def _decode_build(raw: Any, where: str) -> BuildSettings:
    table = _expect(raw, dict, where)
    return BuildSettings(
        entry=_expect(table.get("entry", ""), str, f"{where}.entry"),
        output=_expect(table.get("output", ""), str, f"{where}.output"),
        ldflags=_expect(table.get("ldflags", ""), str, f"{where}.ldflags"),
        tags=_str_list(table.get("tags", []), f"{where}.tags"),
        extra_env=_str_list(table.get("extra_env", []), f"{where}.extra_env"),
    )


def _decode_run(raw: Any, where: str) -> RunSettings:
    table = _expect(raw, dict, where)
    return RunSettings(
        entry=_expect(table.get("entry", ""), str, f"{where}.entry"),
        args=_str_list(table.get("args", []), f"{where}.args"),
    )


def _decode_template(name: str, raw: Any) -> TemplateDefinition:
    where = f"templates.{name}"
    table = _expect(raw, dict, where)
    return TemplateDefinition(
        name=name,
        description=_expect(table.get("description", ""), str, f"{where}.description"),
        mode=_expect(table.get("mode", ""), str, f"{where}.mode"),
        dirs=_str_list(table.get("dirs", []), f"{where}.dirs"),
        files=_str_table(table.get("files", {}), f"{where}.files"),
        commands=_str_table(table.get("commands", {}), f"{where}.commands"),
        build=_decode_build(table.get("build", {}), f"{where}.build"),
        run=_decode_run(table.get("run", {}), f"{where}.run"),
    )


def _decode_defaults(raw: Any) -> Defaults:
    table = _expect(raw, dict, "defaults")
    return Defaults(
        author=_expect(table.get("author", ""), str, "defaults.author"),
        license=_expect(table.get("license", DEFAULT_LICENSE), str, "defaults.license"),
    )


def decode_registry(data: Mapping[str, Any], path: Path | None = None) -> TemplateRegistry:
    """Build a registry from an already-parsed TOML document.

    Raises:
        TypeError: If any field has the wrong type.
    """
    raw_templates = _expect(data.get("templates", {}), dict, "templates")
    templates = {name: _decode_template(name, raw) for name, raw in raw_templates.items()}
    return TemplateRegistry(
        templates=templates,
        defaults=_decode_defaults(data.get("defaults", {})),
        path=path,
    )


def load_registry(path: Path | None = None) -> TemplateRegistry:
    """
    Load the template registry from *path* (default: the global config path).

    A missing file is not an error: an empty registry with default settings is
    returned instead.

    Raises:
        ConfigDecodeError: If the file exists but is not valid TOML or does not
            match the expected schema.
    """
    config_path = path if path is not None else global_config_path()
    if not config_path.exists():
        return TemplateRegistry()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
        return decode_registry(data, config_path)
    except (tomllib.TOMLDecodeError, TypeError, UnicodeDecodeError, OSError) as exc:
        raise ConfigDecodeError(config_path, exc) from exc


def write_global_config(path: Path | None = None, *, overwrite: bool = False) -> Path:
    """
    Write the example global configuration and return its path.

    Raises:
        FileExistsError: If the file exists and *overwrite* is false.
        FileWriteError: On any I/O failure.
    """
    config_path = path if path is not None else global_config_path()
    if config_path.exists() and not overwrite:
        raise FileExistsError(config_path)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(global_config_toml(), encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(config_path, exc) from exc
    return config_path
