"""Clack-style mode picker using Rich + simple-term-menu."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

from gosprout.core import Mode, TemplateRegistry

_console = Console()


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _choose(question: str, labels: list[str]) -> int:
    """Show a menu of *labels* and return the index picked. Cancelling exits with 1."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    picked = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    ).show()
    if picked is None:
        raise SystemExit(1)
    index = int(picked)

    # Replace the open question and its bar with the answered form.
    _clear_lines(2)
    _console.print(f"[bold green]◇[/]  {question}")
    for i, label in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {escape(label)}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{escape(label)}[/]")
    _print_bar()
    return index


def prompt_mode(registry: TemplateRegistry) -> str:
    """Prompt user to choose a built-in mode or a template. Returns the mode token."""
    tokens = [m.value for m in Mode]
    labels = [f"{m.label} ({m.value})" for m in Mode]
    for name in registry.names():
        if Mode.parse(name) is not None:
            # Shadowed by the built-in mode of the same name.
            continue
        template = registry.templates[name]
        tokens.append(name)
        labels.append(f"{name} (template, base: {template.mode or '?'})")
    return tokens[_choose("Choose a project mode", labels)]
