"""Integration tests for the gosprout CLI."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import click
import pytest
from typer.testing import CliRunner

from gosprout.cli import app
from gosprout.core import CommandResult

runner = CliRunner()

TEMPLATES = """\
[templates.cli]
description = "CLI tool project"
mode = "simple"
dirs = ["cmd"]

[templates.cli.commands]
install = "go install ."

[templates.api]
description = "Web API"
mode = "project"
dirs = ["api"]

[templates.api.commands]
dev = "go run ./cmd/server"
"""


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture(autouse=True)
def fake_commands(monkeypatch: pytest.MonkeyPatch, fake_runner):
    monkeypatch.setattr("gosprout.core.scaffold.run_command", fake_runner)
    return fake_runner


@pytest.fixture
def templates(write_config, config_file: Path) -> Path:
    return write_config(TEMPLATES)


def _invoke(args: list[str], config: Path):
    return runner.invoke(app, ["--config", str(config), *args])


def _flat(output: str) -> str:
    # Normalize whitespace to handle Rich line-wrapping
    return " ".join(output.split())


class TestNewCommand:
    def test_default_mode_is_simple(self, workdir: Path, config_file: Path) -> None:
        result = _invoke(["new", "hello"], config_file)

        assert result.exit_code == 0, result.output
        assert (workdir / "hello" / "main.go").is_file()
        assert (workdir / "hello" / "bin").is_dir()
        assert not (workdir / "hello" / ".gosprout.toml").exists()
        assert "Done!" in result.output

    def test_project_mode(self, workdir: Path, config_file: Path) -> None:
        result = _invoke(["new", "svc", "--mode", "project"], config_file)

        assert result.exit_code == 0, result.output
        assert (workdir / "svc" / "cmd" / "server" / "main.go").is_file()
        assert (workdir / "svc" / "internal" / ".gitkeep").is_file()
        assert "go run ./cmd/server" in result.output

    def test_template_mode(self, workdir: Path, templates: Path) -> None:
        result = _invoke(["new", "svc", "-m", "api"], templates)

        assert result.exit_code == 0, result.output
        assert (workdir / "svc" / "api" / ".gitkeep").is_file()
        config = (workdir / "svc" / ".gosprout.toml").read_text()
        assert 'dev = "go run ./cmd/server"' in config
        assert 'entry = "cmd/server"' in config

    def test_runs_go_and_git(self, workdir: Path, config_file: Path, fake_commands) -> None:
        _invoke(["new", "hello"], config_file)

        assert fake_commands.programs == ["go", "git"]

    def test_existing_directory_fails(
        self, workdir: Path, config_file: Path, fake_commands
    ) -> None:
        (workdir / "hello").mkdir()

        result = _invoke(["new", "hello"], config_file)

        assert result.exit_code == 1
        assert "Directory 'hello' already exists." in _flat(result.output)
        assert fake_commands.calls == []

    def test_existing_directory_with_template(self, workdir: Path, templates: Path) -> None:
        (workdir / "svc").mkdir()

        result = _invoke(["new", "svc", "-m", "api"], templates)

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert list((workdir / "svc").iterdir()) == []

    def test_invalid_name_fails(self, config_file: Path) -> None:
        result = _invoke(["new", "a/b"], config_file)

        assert result.exit_code == 1
        assert "Invalid project name" in result.output

    def test_unknown_mode_lists_templates(self, workdir: Path, templates: Path) -> None:
        result = _invoke(["new", "svc", "--mode", "nonexistent"], templates)

        assert result.exit_code == 2
        assert "nonexistent" in result.output
        assert "api" in result.output
        assert "cli" in result.output
        assert not (workdir / "svc").exists()

    def test_unknown_mode_without_templates(self, config_file: Path) -> None:
        result = _invoke(["new", "svc", "--mode", "api"], config_file)

        assert result.exit_code == 2
        assert "No custom templates defined" in _flat(result.output)

    def test_broken_config_blocks_templates(self, write_config, config_file: Path) -> None:
        write_config("[templates.api\n")

        result = _invoke(["new", "svc", "--mode", "api"], config_file)

        assert result.exit_code == 1
        assert "Failed to parse" in result.output

    def test_broken_config_does_not_block_builtins(
        self, workdir: Path, write_config, config_file: Path
    ) -> None:
        write_config("[templates.api\n")

        result = _invoke(["new", "svc", "--mode", "project"], config_file)

        assert result.exit_code == 0, result.output
        assert (workdir / "svc").is_dir()

    def test_invalid_template_mode_fails(self, write_config, config_file: Path) -> None:
        write_config('[templates.odd]\nmode = "monorepo"\n')

        result = _invoke(["new", "svc", "--mode", "odd"], config_file)

        assert result.exit_code == 1
        assert "monorepo" in result.output

    def test_git_failure_is_warning(self, workdir: Path, config_file: Path, fake_commands) -> None:
        fake_commands.failures["git"] = CommandResult(returncode=1, output="no git")

        result = _invoke(["new", "hello"], config_file)

        assert result.exit_code == 0, result.output
        assert "Warning:" in result.output
        assert "Done!" in result.output

    def test_module_init_failure_is_fatal(self, config_file: Path, fake_commands) -> None:
        fake_commands.failures["go"] = CommandResult(returncode=1, output="go: bad module")

        result = _invoke(["new", "hello"], config_file)

        assert result.exit_code == 1
        assert "go: bad module" in result.output

    def test_config_from_environment(self, workdir: Path, templates: Path) -> None:
        result = runner.invoke(
            app, ["new", "tool", "--mode", "cli"], env={"GOSPROUT_CONFIG": str(templates)}
        )

        assert result.exit_code == 0, result.output
        assert (workdir / "tool" / "cmd" / ".gitkeep").is_file()

    @patch("gosprout.cli._prompts.TerminalMenu")
    def test_interactive_mode(
        self, mock_menu_cls: MagicMock, workdir: Path, templates: Path
    ) -> None:
        mock_menu_cls.return_value.show.return_value = 2  # api, first sorted template

        result = _invoke(["new", "svc", "--interactive"], templates)

        assert result.exit_code == 0, result.output
        assert (workdir / "svc" / "api").is_dir()


class TestListModes:
    def test_list_modes_exits_zero(self, config_file: Path) -> None:
        result = _invoke(["new", "unused", "--list-modes"], config_file)

        assert result.exit_code == 0
        assert "simple" in result.output
        assert "project" in result.output

    def test_list_modes_shorthand(self, config_file: Path) -> None:
        # -l works without a project name (eager option fires before arg validation)
        result = _invoke(["new", "-l"], config_file)
        assert result.exit_code == 0

    def test_list_modes_sorted(self, templates: Path) -> None:
        result = _invoke(["new", "-l"], templates)

        assert result.output.index("api") < result.output.index("cli")

    def test_list_modes_does_not_create_directory(self, workdir: Path, config_file: Path) -> None:
        _invoke(["new", "should-not-exist", "--list-modes"], config_file)
        assert not (workdir / "should-not-exist").exists()

    def test_help_mentions_list_modes(self) -> None:
        result = runner.invoke(app, ["new", "--help"])
        assert "--list-modes" in click.unstyle(result.output)
        assert result.exit_code == 0


class TestConfigCommands:
    def test_init_creates_file(self, config_file: Path) -> None:
        result = _invoke(["config", "init"], config_file)

        assert result.exit_code == 0, result.output
        assert "[templates.api]" in config_file.read_text()
        assert "Created global config" in result.output

    def test_init_does_not_overwrite(self, write_config, config_file: Path) -> None:
        write_config("# mine\n")

        result = _invoke(["config", "init"], config_file)

        assert result.exit_code == 0
        assert "already exists" in result.output
        assert config_file.read_text() == "# mine\n"

    def test_init_force(self, write_config, config_file: Path) -> None:
        write_config("# mine\n")

        result = _invoke(["config", "init", "--force"], config_file)

        assert result.exit_code == 0
        assert "[templates.api]" in config_file.read_text()

    def test_path_status(self, write_config, config_file: Path) -> None:
        result = _invoke(["config", "path"], config_file)
        assert "not created" in result.output

        write_config("")
        result = _invoke(["config", "path"], config_file)
        assert "Status: exists" in result.output

    def test_list_without_config(self, config_file: Path) -> None:
        result = _invoke(["config", "list"], config_file)

        assert result.exit_code == 0
        assert "No global config found" in result.output

    def test_list_empty(self, write_config, config_file: Path) -> None:
        write_config('[defaults]\nauthor = "me"\n')

        result = _invoke(["config", "list"], config_file)

        assert "No templates defined" in result.output

    def test_list_is_sorted(self, write_config, config_file: Path) -> None:
        write_config(
            '[templates.zeta]\nmode = "simple"\n'
            '[templates.alpha]\nmode = "project"\ndescription = "first"\n'
        )

        result = _invoke(["config", "list"], config_file)

        assert result.exit_code == 0
        assert result.output.index("alpha") < result.output.index("zeta")
        assert "first" in result.output
        assert "(no description)" in result.output

    def test_list_broken_config(self, write_config, config_file: Path) -> None:
        write_config("= nope")

        result = _invoke(["config", "list"], config_file)

        assert result.exit_code == 1
        assert "Failed to parse" in result.output

    def test_edit_shows_location(self, write_config, config_file: Path) -> None:
        write_config("")

        result = _invoke(["config", "edit"], config_file)

        assert result.exit_code == 0
        assert "Global config location" in result.output


BRACKETED = """\
[templates."[/tag]"]
description = "odd"
mode = "[/oops]"

[templates.plain]
mode = "simple"

[templates.plain.files]
"[/f].txt" = "x"
"""


class TestBracketedConfigValues:
    @pytest.fixture
    def bracketed(self, write_config) -> Path:
        return write_config(BRACKETED)

    def test_config_list(self, bracketed: Path) -> None:
        result = _invoke(["config", "list"], bracketed)

        assert result.exit_code == 0, result.output
        assert "[/tag]" in result.output
        assert "(base: [/oops])" in result.output

    def test_list_modes(self, bracketed: Path) -> None:
        result = _invoke(["new", "-l"], bracketed)

        assert result.exit_code == 0, result.output
        assert "[/tag]" in result.output
        assert "[/oops]" in result.output

    def test_unknown_mode_listing(self, bracketed: Path) -> None:
        result = _invoke(["new", "svc", "-m", "nope"], bracketed)

        assert result.exit_code == 2
        assert "[/tag]" in result.output

    def test_new_header_and_error(self, workdir: Path, bracketed: Path) -> None:
        result = _invoke(["new", "svc", "-m", "[/tag]"], bracketed)

        assert result.exit_code == 1
        assert "template [/tag]" in result.output
        assert "[/oops]" in result.output
        assert not (workdir / "svc").exists()

    def test_created_file_names(self, workdir: Path, bracketed: Path) -> None:
        result = _invoke(["new", "svc", "-m", "plain"], bracketed)

        assert result.exit_code == 0, result.output
        assert "[/f].txt" in result.output
        assert (workdir / "svc" / "[" / "f].txt").read_text() == "x"
