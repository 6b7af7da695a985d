"""Write built-in layouts and template additions to disk."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath
import re

from gosprout.core.errors import (
    AlreadyExistsError,
    DirectoryCreateError,
    FileWriteError,
    InvalidProjectNameError,
    TemplatePathError,
    VersionControlInitWarning,
)
from gosprout.core.project_config import (
    PROJECT_CONFIG_FILENAME,
    build_command_set,
    render_project_config,
)
from gosprout.core.registry import TemplateDefinition
from gosprout.core.resolver import ResolvedMode
from gosprout.core.runner import CommandRunner, init_module, init_vcs, run_command
from gosprout.core.types import Mode
from gosprout.templates import (
    gitignore,
    project_main_go,
    project_readme,
    simple_main_go,
    simple_readme,
)

PLACEHOLDER = ".gitkeep"

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def validate_project_name(name: str) -> None:
    """
    Reject names that cannot be both a directory and a module path.

    Raises:
        InvalidProjectNameError: With the reason the name was rejected.
    """
    if not name:
        raise InvalidProjectNameError(name, "name must not be empty")
    if "/" in name or "\\" in name:
        raise InvalidProjectNameError(name, "name must not contain path separators")
    if not _NAME_PATTERN.match(name):
        raise InvalidProjectNameError(
            name,
            "name must start with a letter or digit and contain only letters, "
            "digits, '.', '_' or '-'",
        )


@dataclass(frozen=True, kw_only=True)
class ProjectSpec:
    """One generation request. The template is borrowed from the registry."""

    name: str
    resolution: ResolvedMode
    parent: Path = Path(".")

    @property
    def root(self) -> Path:
        return self.parent / self.name

    @property
    def template(self) -> TemplateDefinition | None:
        return self.resolution.template


@dataclass
class ScaffoldReport:
    """
    Outcome of a successful generation.

    Attributes:
        root: Project root directory.
        created: Created entries relative to root, directories end with ``/``.
        warnings: Soft failures that did not stop generation.
    """

    root: Path
    created: list[str] = field(default_factory=list)
    warnings: list[VersionControlInitWarning] = field(default_factory=list)

    def add(self, path: Path, *, is_dir: bool = False) -> None:
        rel = path.relative_to(self.root).as_posix()
        entry = f"{rel}/" if is_dir else rel
        if entry not in self.created:
            self.created.append(entry)


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(path, exc) from exc


def _write(report: ScaffoldReport, path: Path, content: str) -> None:
    _make_dir(path.parent)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(path, exc) from exc
    report.add(path)


def _create_root(root: Path) -> None:
    if root.exists() or root.is_symlink():
        raise AlreadyExistsError(root)
    try:
        root.mkdir(parents=True)
    except FileExistsError as exc:
        raise AlreadyExistsError(root) from exc
    except OSError as exc:
        raise DirectoryCreateError(root, exc) from exc


def _template_path(root: Path, template: TemplateDefinition, rel: str) -> Path:
    """Join *rel* under *root*. An absolute path is taken relative to the root."""
    path = PurePath(rel)
    parts = path.parts[1:] if path.anchor else path.parts
    if ".." in parts:
        raise TemplatePathError(template.name, rel)
    return root.joinpath(*parts)


def _layout(mode: Mode, name: str) -> tuple[list[str], dict[str, str]]:
    """Directories and files, relative to root, for a built-in layout."""
    if mode is Mode.SIMPLE:
        dirs = ["bin"]
        files = {
            "main.go": simple_main_go(name),
            "README.md": simple_readme(name),
            ".gitignore": gitignore(),
        }
    else:
        dirs = ["cmd/server", "internal", "pkg", "test", "bin"]
        files = {
            "cmd/server/main.go": project_main_go(name),
            f"internal/{PLACEHOLDER}": "",
            f"pkg/{PLACEHOLDER}": "",
            f"test/{PLACEHOLDER}": "",
            "README.md": project_readme(name),
            ".gitignore": gitignore(),
        }
    return dirs, files


def build_scaffold(
    root: Path,
    name: str,
    mode: Mode,
    *,
    runner: CommandRunner | None = None,
) -> ScaffoldReport:
    """
    Create the base layout for a built-in *mode* at *root*.

    Directories are created first, then ``go mod init`` runs, then files are
    written. Nothing is rolled back on failure. ``git init`` runs last and its
    failure only adds a warning to the report.

    Raises:
        AlreadyExistsError: If *root* already exists. Nothing is written.
        DirectoryCreateError, FileWriteError: On I/O failure.
        ModuleInitError: If ``go mod init`` fails.
    """
    runner = runner or run_command
    _create_root(root)
    report = ScaffoldReport(root=root)

    dirs, files = _layout(mode, name)
    for rel in dirs:
        path = root / rel
        _make_dir(path)
        report.add(path, is_dir=True)

    init_module(root, name, runner)

    for rel, content in files.items():
        _write(report, root / rel, content)

    if warning := init_vcs(root, runner):
        report.warnings.append(warning)
    return report


def apply_template(
    root: Path,
    name: str,
    template: TemplateDefinition,
    *,
    runner: CommandRunner | None = None,
) -> ScaffoldReport:
    """
    Scaffold the template's base mode, then layer its additions on top.

    Extra paths are always placed under *root*, a leading anchor is dropped.
    Extra files overwrite built-in files with the same path. The first error
    aborts the remaining steps.

    Raises:
        TemplateModeError: If the template's base mode is not built-in.
        TemplatePathError: If an extra path contains ``..``. Nothing is written.
        Everything :func:`build_scaffold` raises.
    """
    mode = template.base_mode
    dirs = [_template_path(root, template, rel) for rel in template.dirs]
    files = {
        _template_path(root, template, rel): content for rel, content in template.files.items()
    }
    report = build_scaffold(root, name, mode, runner=runner)

    for path in dirs:
        _make_dir(path)
        report.add(path, is_dir=True)
        _write(report, path / PLACEHOLDER, "")

    for path, content in files.items():
        _write(report, path, content)

    config = render_project_config(name, mode, build_command_set(template))
    _write(report, root / PROJECT_CONFIG_FILENAME, config)
    return report


def generate_project(spec: ProjectSpec, *, runner: CommandRunner | None = None) -> ScaffoldReport:
    """Generate the project described by *spec*."""
    validate_project_name(spec.name)
    if spec.template is not None:
        return apply_template(spec.root, spec.name, spec.template, runner=runner)
    return build_scaffold(spec.root, spec.name, spec.resolution.base, runner=runner)
