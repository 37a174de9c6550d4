"""Tests for layered taiz settings."""

from __future__ import annotations

import logging
from pathlib import Path

from taiz_core.paths import UserDirs
from taiz_core.settings import PROJECT_CONFIG_NAME, USER_CONFIG_NAME, SettingsResolver


def test_setting_resolution_precedence(tmp_path: Path) -> None:
    user_config_dir = tmp_path / "user-config"
    user_dirs = UserDirs(config_dir_override=user_config_dir)
    user_config_dir.mkdir()
    (user_config_dir / USER_CONFIG_NAME).write_text('manifest_file = "user.yaml"')

    project = tmp_path / "project"
    project.mkdir()
    (project / PROJECT_CONFIG_NAME).write_text('manifest_file = "project.yaml"')

    resolver = SettingsResolver(
        cli_overrides={"manifest_file": "cli.yaml"},
        env={"TAIZ_MANIFEST": "env.yaml"},
        user_dirs=user_dirs,
    )
    assert resolver.resolve_setting("manifest_file", project) == "cli.yaml"

    resolver = SettingsResolver(env={"TAIZ_MANIFEST": "env.yaml"}, user_dirs=user_dirs)
    assert resolver.resolve_setting("manifest_file", project) == "env.yaml"

    resolver = SettingsResolver(env={}, user_dirs=user_dirs)
    assert resolver.resolve_setting("manifest_file", project) == "project.yaml"
    assert resolver.resolve_setting("manifest_file", tmp_path) == "user.yaml"

    resolver = SettingsResolver(env={}, user_dirs=UserDirs(config_dir_override=tmp_path / "none"))
    assert resolver.resolve_setting("manifest_file", tmp_path) == "taiz.yaml"


def test_resolve_builds_settings_with_defaults(tmp_path: Path) -> None:
    resolver = SettingsResolver(env={}, user_dirs=UserDirs(config_dir_override=tmp_path))

    settings = resolver.resolve(tmp_path)

    assert settings.manifest_file == "taiz.yaml"
    assert settings.lock_file == "taiz-lock.yaml"
    assert settings.fallback_version == "1.0.0"
    assert settings.log_level_value == logging.WARNING


def test_log_level_from_environment(tmp_path: Path) -> None:
    resolver = SettingsResolver(
        env={"TAIZ_LOG_LEVEL": "debug"},
        user_dirs=UserDirs(config_dir_override=tmp_path),
    )

    assert resolver.resolve(tmp_path).log_level_value == logging.DEBUG


def test_unreadable_project_config_is_ignored(tmp_path: Path) -> None:
    (tmp_path / PROJECT_CONFIG_NAME).write_text("manifest_file = ", encoding="utf-8")
    resolver = SettingsResolver(env={}, user_dirs=UserDirs(config_dir_override=tmp_path / "user"))

    assert resolver.resolve_setting("manifest_file", tmp_path) == "taiz.yaml"
