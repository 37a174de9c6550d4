"""Behavioral tests for the taiz CLI dispatcher."""

from __future__ import annotations

from pathlib import Path

import pytest

from taiz_cli import main as cli_main


@pytest.mark.parametrize("argv", [[], ["-h"], ["--help"], ["help"]])
def test_help_lists_commands(
    argv: list[str], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = cli_main.main(argv, start_dir=tmp_path)

    out = capsys.readouterr().out
    assert code == 0
    assert "Usage: taiz <command> [args...]" in out
    for name in ("init", "install (i)", "uninstall", "dev", "build", "run"):
        assert f"  {name}" in out


def test_version_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main.main(["--version"], start_dir=tmp_path) == 0
    assert capsys.readouterr().out.strip() == f"taiz v{cli_main.CLI_VERSION}"


def test_unknown_command_exits_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli_main.main(["frobnicate", "now"], start_dir=tmp_path)

    captured = capsys.readouterr()
    assert code == 1
    assert "Invalid command: frobnicate now" in captured.err
    assert "--help" in captured.out


def test_qualified_command_name_resolves(tmp_path: Path, fake_runner) -> None:
    assert cli_main.main(["taiz:init"], start_dir=tmp_path) == 0
    assert (tmp_path / "taiz.yaml").is_file()


def test_command_help_exits_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main.main(["install", "--help"], start_dir=tmp_path) == 0
    assert "--global" in capsys.readouterr().out


def test_bad_arguments_exit_with_usage_error(tmp_path: Path) -> None:
    assert cli_main.main(["uninstall"], start_dir=tmp_path) == 2


def test_project_dir_option_targets_other_root(tmp_path: Path, fake_runner) -> None:
    target = tmp_path / "service"
    target.mkdir()

    code = cli_main.main(["init", "-C", str(target)], start_dir=tmp_path)

    assert code == 0
    assert (target / "taiz.yaml").is_file()
    assert not (tmp_path / "taiz.yaml").exists()
