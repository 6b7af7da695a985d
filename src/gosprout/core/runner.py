"""External commands run against a freshly generated project."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
import subprocess

from gosprout.core.errors import ModuleInitError, VersionControlInitWarning


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def detail(self) -> str:
        return self.output.strip() or f"exit status {self.returncode}"


CommandRunner = Callable[[Sequence[str], Path], CommandResult]


def run_command(args: Sequence[str], cwd: Path) -> CommandResult:
    """Run *args* in *cwd* with output captured. A missing executable is a failed result."""
    try:
        proc = subprocess.run(
            list(args),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        return CommandResult(returncode=127, output=f"{args[0]}: {exc.strerror}")
    return CommandResult(returncode=proc.returncode, output=proc.stderr or proc.stdout)


def init_module(root: Path, name: str, runner: CommandRunner) -> None:
    """Run ``go mod init <name>`` in *root*. Failure is fatal."""
    result = runner(["go", "mod", "init", name], root)
    if not result.ok:
        raise ModuleInitError(root, result.detail)


def init_vcs(root: Path, runner: CommandRunner) -> VersionControlInitWarning | None:
    """Run ``git init`` in *root*. Failure is reported, not raised."""
    result = runner(["git", "init"], root)
    if result.ok:
        return None
    return VersionControlInitWarning(root, result.detail)
