"""Behavioral tests for ``taiz init``."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from taiz_cli import main as cli_main


def test_init_records_detected_project_types(
    tmp_path: Path, fake_runner, capsys: pytest.CaptureFixture[str]
) -> None:
    project = tmp_path / "web-app"
    project.mkdir()
    (project / "package.json").write_text("{}", encoding="utf-8")
    (project / "requirements.txt").write_text("", encoding="utf-8")

    code = cli_main.main(["init"], start_dir=project)

    out = capsys.readouterr().out
    raw = yaml.safe_load((project / "taiz.yaml").read_text(encoding="utf-8"))
    lock = yaml.safe_load((project / "taiz-lock.yaml").read_text(encoding="utf-8"))
    assert code == 0
    assert raw["name"] == "web-app"
    assert raw["projectTypes"] == ["node", "python"]
    assert raw["scripts"] == {"dev": "taiz dev", "build": "taiz build"}
    assert lock == {"version": "1.0.0", "lockfileVersion": 1, "dependencies": {}, "devDependencies": {}}
    assert "Detected project types: node, python" in out
    assert "node: found package.json" in out
    assert fake_runner.calls == []


def test_init_generic_project(tmp_path: Path, fake_runner, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli_main.main(["init", "--name", "scratch"], start_dir=tmp_path)

    raw = yaml.safe_load((tmp_path / "taiz.yaml").read_text(encoding="utf-8"))
    assert code == 0
    assert raw["name"] == "scratch"
    assert raw["projectTypes"] == []
    assert "Creating generic taiz project" in capsys.readouterr().out


def test_init_overwrites_existing_manifest(
    tmp_path: Path, fake_runner, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "taiz.yaml").write_text("name: old\nscripts:\n  lint: ruff\n", encoding="utf-8")

    assert cli_main.main(["init"], start_dir=tmp_path) == 0

    raw = yaml.safe_load((tmp_path / "taiz.yaml").read_text(encoding="utf-8"))
    assert raw["name"] == tmp_path.name
    assert "lint" not in raw["scripts"]
    assert "Overwriting existing taiz.yaml" in capsys.readouterr().out


def test_init_honours_configured_manifest_name(tmp_path: Path, fake_runner) -> None:
    (tmp_path / ".taiz.toml").write_text(
        'manifest_file = "deps.yaml"\nlock_file = "deps-lock.yaml"\n', encoding="utf-8"
    )

    assert cli_main.main(["init"], start_dir=tmp_path) == 0
    assert (tmp_path / "deps.yaml").is_file()
    assert (tmp_path / "deps-lock.yaml").is_file()
    assert not (tmp_path / "taiz.yaml").exists()
