"""Typer CLI application for gosprout."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Context, Exit, Option, Typer

import gosprout
from gosprout.cli._prompts import prompt_mode
from gosprout.core import (
    ConfigDecodeError,
    GosproutError,
    Mode,
    ProjectSpec,
    TemplateRegistry,
    UnknownModeError,
    generate_project,
    global_config_path,
    load_registry,
    resolve_mode,
    validate_project_name,
    write_global_config,
)

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
config_app = Typer(help="Manage the global gosprout configuration.", no_args_is_help=True)
app.add_typer(config_app, name="config")
_console = Console()


@app.callback()
def main(
    ctx: Context,
    config: Annotated[
        Path | None,
        Option(
            "--config",
            envvar="GOSPROUT_CONFIG",
            help="Global config file. Defaults to ~/.gosprout/config.toml.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """gosprout — scaffolding tool for Go projects."""
    ctx.obj = config


_FILE_DESCRIPTIONS: dict[str, str] = {
    "main.go": "entry point",
    "cmd/server/main.go": "entry point",
    "README.md": "project readme",
    ".gitignore": "git ignore rules",
    ".gosprout.toml": "project configuration",
    "bin/": "build output",
}


def _config_path(ctx: Context) -> Path:
    return ctx.obj if ctx.obj is not None else global_config_path()


def _error(message: str) -> None:
    _console.print(f"[bold red]Error:[/] {escape(message)}")


def _load_registry(path: Path) -> TemplateRegistry:
    try:
        return load_registry(path)
    except ConfigDecodeError as exc:
        _error(str(exc))
        raise Exit(code=1) from None


def _print_modes(registry: TemplateRegistry) -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Built-in modes")
    _console.print("[dim]│[/]")
    for m in Mode:
        _console.print(f"[dim]│[/]  [bold cyan]{m.value:<12}[/] {m.description}")
    _console.print("[dim]│[/]")

    names = [n for n in registry.names() if Mode.parse(n) is None]
    if not names:
        _console.print("[dim]│[/]  No custom templates defined.")
        _console.print("[dim]│[/]  Run 'gosprout config init' to create one with examples.")
        _console.print()
        return

    _console.print("[bold cyan]◆[/]  Templates from global config")
    _console.print("[dim]│[/]")
    for name in names:
        template = registry.templates[name]
        desc = escape(template.description or "(no description)")
        base = f"[dim](base: {escape(template.mode)})[/]"
        _console.print(f"[dim]│[/]  [bold cyan]{escape(name):<12}[/] {desc} {base}")
    _console.print()


def _list_modes_callback(ctx: Context, value: bool) -> None:
    if value:
        _print_modes(_load_registry(_config_path(ctx)))
        raise Exit()


@app.command()
def new(
    ctx: Context,
    project_name: Annotated[str, Argument(help="Name for the new project directory")],
    mode: Annotated[
        str | None,
        Option(
            "--mode",
            "-m",
            help="'simple' (default), 'project', or a template name from the global config.",
            show_default=False,
        ),
    ] = None,
    interactive: Annotated[
        bool,
        Option("--interactive", "-i", help="Choose the mode from a menu."),
    ] = False,
    list_modes: Annotated[
        bool,
        Option(
            "--list-modes",
            "-l",
            help="List built-in modes and templates and exit.",
            callback=_list_modes_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Go project."""
    config_path = _config_path(ctx)

    try:
        validate_project_name(project_name)
    except GosproutError as exc:
        _error(str(exc))
        raise Exit(code=1) from None

    registry: TemplateRegistry | None = None
    if mode is None and interactive:
        registry = _load_registry(config_path)
        mode = prompt_mode(registry)
    elif mode is None:
        mode = Mode.SIMPLE.value

    # Built-in modes never touch the global config.
    if registry is None and Mode.parse(mode) is None:
        registry = _load_registry(config_path)

    try:
        resolution = resolve_mode(mode, registry, config_path=config_path)
    except UnknownModeError as exc:
        _console.print()
        _error(f"Unknown mode or template {exc.token!r}.")
        _print_modes(registry if registry is not None else TemplateRegistry())
        raise Exit(code=2) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  gosprout v{gosprout.__version__}")
    _console.print("[dim]│[/]")

    _console.print("[bold green]◇[/]  Project mode")
    if resolution.template is not None:
        base = escape(resolution.template.mode)
        _console.print(f"[dim]│[/]  template {escape(mode)} [dim](base: {base})[/]")
    else:
        _console.print(f"[dim]│[/]  {resolution.base.label}")
    _console.print("[dim]│[/]")

    _console.print(f"[bold green]◇[/]  Creating {project_name}/...")

    try:
        report = generate_project(ProjectSpec(name=project_name, resolution=resolution))
    except GosproutError as exc:
        _console.print("[dim]│[/]")
        _error(str(exc))
        raise Exit(code=1) from None

    for name in report.created:
        desc = _FILE_DESCRIPTIONS.get(name, "")
        desc_str = f" [dim]— {desc}[/]" if desc else ""
        _console.print(f"[dim]│[/]  {escape(name)}{desc_str}")

    for warning in report.warnings:
        _console.print("[dim]│[/]")
        _console.print(f"[bold yellow]Warning:[/] {escape(str(warning))}")

    entry = resolution.base.entry
    run_target = entry if entry == "." else f"./{entry}"
    _console.print("[dim]│[/]")
    _console.print(f"[bold cyan]●[/]  Done! cd {project_name} && go run {run_target}")
    _console.print()


@config_app.command("init")
def config_init(
    ctx: Context,
    force: Annotated[
        bool, Option("--force", "-f", help="Overwrite an existing global config.")
    ] = False,
) -> None:
    """Create the global config file with example templates."""
    path = _config_path(ctx)

    if path.exists() and not force:
        _console.print(f"Global config already exists at: {path}")
        _console.print("Use 'gosprout config edit' to modify it, or pass --force to overwrite.")
        return

    try:
        write_global_config(path, overwrite=force)
    except GosproutError as exc:
        _error(str(exc))
        raise Exit(code=1) from None

    _console.print(f"Created global config at: {path}")
    _console.print()
    _console.print("You can now:")
    _console.print("  - Edit the config to add custom templates")
    _console.print("  - Use 'gosprout new <name> --mode <template>' to create projects")
    _console.print("  - Run 'gosprout config list' to see available templates")


@config_app.command("path")
def config_path_cmd(ctx: Context) -> None:
    """Show the global config file path."""
    path = _config_path(ctx)
    _console.print(f"Global config path: {path}")

    if path.exists():
        _console.print("Status: exists")
    else:
        _console.print("Status: not created")
        _console.print("Run 'gosprout config init' to create it.")


@config_app.command("list")
def config_list(ctx: Context) -> None:
    """List templates defined in the global config."""
    path = _config_path(ctx)

    if not path.exists():
        _console.print("No global config found.")
        _console.print("Run 'gosprout config init' to create one with example templates.")
        return

    registry = _load_registry(path)
    if not len(registry):
        _console.print("No templates defined.")
        _console.print("Edit your config file to add templates.")
        return

    _console.print("Available templates:")
    _console.print()
    for name in registry.names():
        template = registry.templates[name]
        desc = escape(template.description or "(no description)")
        _console.print(f"  {escape(name):<12}  {desc} (base: {escape(template.mode)})")
    _console.print()
    _console.print("Usage: gosprout new <name> --mode <template>")


@config_app.command("edit")
def config_edit(ctx: Context) -> None:
    """Show where to edit the global config."""
    path = _config_path(ctx)

    if not path.exists():
        _console.print("No global config found.")
        _console.print("Run 'gosprout config init' to create one first.")
        return

    _console.print(f"Global config location: {path}")
    _console.print("Please open this file in your preferred editor.")
