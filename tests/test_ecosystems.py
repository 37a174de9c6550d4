"""Tests for the per-ecosystem command tables."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from taiz_core.ecosystems import Ecosystem, ordered_toolchains, toolchain_for


def test_parse_accepts_names_and_members() -> None:
    assert Ecosystem.parse("Rust") is Ecosystem.RUST
    assert Ecosystem.parse(Ecosystem.GO) is Ecosystem.GO
    with pytest.raises(ValueError):
        Ecosystem.parse("haskell")


def test_ordered_toolchains_match_detection_order() -> None:
    assert [toolchain.ecosystem.value for toolchain in ordered_toolchains()] == [
        "node",
        "python",
        "rust",
        "go",
    ]


@pytest.mark.parametrize(
    ("ecosystem", "dev", "global_", "expected"),
    [
        ("node", False, False, ["npm", "install", "left-pad"]),
        ("node", True, False, ["npm", "install", "--save-dev", "left-pad"]),
        ("node", False, True, ["npm", "install", "-g", "left-pad"]),
        ("python", False, False, ["pip", "install", "left-pad"]),
        ("python", False, True, ["pip", "install", "--user", "left-pad"]),
        ("rust", False, False, ["cargo", "add", "left-pad"]),
        ("rust", True, False, ["cargo", "add", "--dev", "left-pad"]),
        ("rust", False, True, ["cargo", "install", "left-pad"]),
        ("go", False, False, ["go", "get", "left-pad"]),
        ("go", False, True, ["go", "install", "left-pad@latest"]),
    ],
)
def test_install_args(ecosystem: str, dev: bool, global_: bool, expected: list[str]) -> None:
    assert toolchain_for(ecosystem).install_args("left-pad", dev=dev, global_=global_) == expected


def test_go_global_install_keeps_explicit_version() -> None:
    assert toolchain_for("go").install_args("golang.org/x/tools/gopls@v0.15.0", global_=True) == [
        "go",
        "install",
        "golang.org/x/tools/gopls@v0.15.0",
    ]


def test_uninstall_args() -> None:
    assert toolchain_for("node").uninstall_args("a") == ["npm", "uninstall", "a"]
    assert toolchain_for("python").uninstall_args("a") == ["pip", "uninstall", "-y", "a"]
    assert toolchain_for("rust").uninstall_args("a") == ["cargo", "remove", "a"]
    assert toolchain_for("go").uninstall_args("a") is None


def test_version_parsers() -> None:
    assert toolchain_for("node").parse_version("4.17.21\n") == "4.17.21"
    assert toolchain_for("python").parse_version("requests (2.31.0)\nAvailable versions: 2.31.0, 2.30.0\n") == "2.31.0"
    assert toolchain_for("python").parse_version("WARNING: nothing here\n") is None
    rust = toolchain_for("rust")
    assert rust.parse_version("registry+https://github.com/rust-lang/crates.io-index#serde@1.0.197\n") == "1.0.197"
    assert rust.parse_version("registry+https://github.com/rust-lang/crates.io-index#serde:1.0.100\n") == "1.0.100"
    assert toolchain_for("go").parse_version("v1.9.1\n") == "1.9.1"
    assert toolchain_for("go").parse_version("") is None


def test_node_dev_prefers_dev_then_start(tmp_path: Path) -> None:
    node = toolchain_for("node")
    package = tmp_path / "package.json"

    package.write_text(json.dumps({"scripts": {"start": "node index.js"}}), encoding="utf-8")
    assert node.dev_args(tmp_path) == ["npm", "run", "start"]

    package.write_text(
        json.dumps({"scripts": {"dev": "vite", "start": "node index.js", "build": "vite build"}}),
        encoding="utf-8",
    )
    assert node.dev_args(tmp_path) == ["npm", "run", "dev"]
    assert node.build_args(tmp_path) == ["npm", "run", "build"]


def test_node_without_scripts_or_with_invalid_json_gives_guidance(tmp_path: Path) -> None:
    node = toolchain_for("node")
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")

    assert node.dev_args(tmp_path) is None
    assert node.build_args(tmp_path) is None
    assert node.dev_guidance


def test_python_dev_entry_files(tmp_path: Path) -> None:
    python = toolchain_for("python")
    assert python.dev_args(tmp_path) is None

    (tmp_path / "manage.py").write_text("", encoding="utf-8")
    assert python.dev_args(tmp_path) == ["python", "manage.py", "runserver"]

    (tmp_path / "main.py").write_text("", encoding="utf-8")
    assert python.dev_args(tmp_path) == ["python", "main.py"]
    assert python.build_args(tmp_path) is None


def test_rust_and_go_lifecycle_commands(tmp_path: Path) -> None:
    assert toolchain_for("rust").dev_args(tmp_path) == ["cargo", "run"]
    assert toolchain_for("rust").build_args(tmp_path) == ["cargo", "build", "--release"]
    assert toolchain_for("go").dev_args(tmp_path) == ["go", "run", "."]
    assert toolchain_for("go").build_args(tmp_path) == ["go", "build"]


def test_resolved_urls_embed_name_and_version() -> None:
    assert toolchain_for("node").resolved_url("@types/node", "20.1.0") == (
        "https://registry.npmjs.org/@types/node/-/node-20.1.0.tgz"
    )
    assert toolchain_for("python").resolved_url("requests", "2.31.0").endswith("/requests/2.31.0/")
    assert "serde/1.0.0" in toolchain_for("rust").resolved_url("serde", "1.0.0")
