"""Shared fixtures for the gosprout test suite."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from gosprout.core import CommandResult


class FakeRunner:
    """Records external commands instead of running them."""

    def __init__(self, failures: dict[str, CommandResult] | None = None) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.failures = failures or {}

    def __call__(self, args: Sequence[str], cwd: Path) -> CommandResult:
        self.calls.append((list(args), cwd))
        return self.failures.get(args[0], CommandResult(returncode=0))

    @property
    def programs(self) -> list[str]:
        return [args[0] for args, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def failing_git() -> FakeRunner:
    return FakeRunner({"git": CommandResult(returncode=128, output="git: not a repo\n")})


@pytest.fixture
def failing_go() -> FakeRunner:
    return FakeRunner({"go": CommandResult(returncode=1, output="go: module path invalid\n")})


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "home" / ".gosprout" / "config.toml"


@pytest.fixture
def write_config(config_file: Path):
    def _write(content: str) -> Path:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(content, encoding="utf-8")
        return config_file

    return _write


def _tree(root: Path) -> set[str]:
    return {
        p.relative_to(root).as_posix() + ("/" if p.is_dir() else "") for p in root.rglob("*")
    }


@pytest.fixture
def tree():
    """Every entry under a root, relative, directories suffixed with '/'."""
    return _tree
