"""Template resolution and project generation engine."""

from gosprout.core.errors import (
    AlreadyExistsError,
    ConfigDecodeError,
    DirectoryCreateError,
    FileWriteError,
    GosproutError,
    InvalidProjectNameError,
    ModuleInitError,
    TemplateModeError,
    TemplatePathError,
    UnknownModeError,
    VersionControlInitWarning,
)
from gosprout.core.project_config import (
    DEFAULT_COMMANDS,
    PROJECT_CONFIG_FILENAME,
    build_command_set,
    render_project_config,
)
from gosprout.core.registry import (
    BuildSettings,
    Defaults,
    RunSettings,
    TemplateDefinition,
    TemplateRegistry,
    global_config_path,
    load_registry,
    write_global_config,
)
from gosprout.core.resolver import BuiltinMode, ResolvedMode, TemplatedMode, resolve_mode
from gosprout.core.runner import CommandResult, CommandRunner, run_command
from gosprout.core.scaffold import (
    ProjectSpec,
    ScaffoldReport,
    apply_template,
    build_scaffold,
    generate_project,
    validate_project_name,
)
from gosprout.core.types import Mode

__all__ = [
    "DEFAULT_COMMANDS",
    "PROJECT_CONFIG_FILENAME",
    "AlreadyExistsError",
    "BuildSettings",
    "BuiltinMode",
    "CommandResult",
    "CommandRunner",
    "ConfigDecodeError",
    "Defaults",
    "DirectoryCreateError",
    "FileWriteError",
    "GosproutError",
    "InvalidProjectNameError",
    "Mode",
    "ModuleInitError",
    "ProjectSpec",
    "ResolvedMode",
    "RunSettings",
    "ScaffoldReport",
    "TemplateDefinition",
    "TemplateModeError",
    "TemplatePathError",
    "TemplateRegistry",
    "TemplatedMode",
    "UnknownModeError",
    "VersionControlInitWarning",
    "apply_template",
    "build_command_set",
    "build_scaffold",
    "generate_project",
    "global_config_path",
    "load_registry",
    "render_project_config",
    "resolve_mode",
    "run_command",
    "validate_project_name",
    "write_global_config",
]
