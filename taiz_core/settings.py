"""Layered settings for the taiz dispatcher."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import tomllib

from .paths import UserDirs

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = ".taiz.toml"
USER_CONFIG_NAME = "config.toml"

_DEFAULTS: dict[str, str] = {
    "manifest_file": "taiz.yaml",
    "lock_file": "taiz-lock.yaml",
    "fallback_version": "1.0.0",
    "log_level": "WARNING",
}
_ENV_KEY_MAP: dict[str, str] = {
    "manifest_file": "TAIZ_MANIFEST",
    "lock_file": "TAIZ_LOCKFILE",
    "fallback_version": "TAIZ_FALLBACK_VERSION",
    "log_level": "TAIZ_LOG_LEVEL",
}


def _load_config_from_file(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.debug("ignoring unreadable config %s: %s", path, exc)
        return {}
    return {key: str(value) for key, value in data.items() if not isinstance(value, dict)}


@dataclass(frozen=True)
class TaizSettings:
    """Resolved settings for one project root."""

    manifest_file: str
    lock_file: str
    fallback_version: str
    log_level: str

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.WARNING)


@dataclass
class SettingsResolver:
    """Resolve settings while honoring CLI, env, project, user, default layers."""

    user_dirs: UserDirs | None = None
    cli_overrides: Mapping[str, str] | None = None
    env: Mapping[str, str] | None = None
    defaults: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        self.user_dirs = self.user_dirs or UserDirs()
        self.cli_overrides = dict(self.cli_overrides or {})
        self.env = self.env if self.env is not None else os.environ
        base_defaults = dict(_DEFAULTS)
        if self.defaults:
            base_defaults.update(self.defaults)
        self.defaults = base_defaults

    def resolve_setting(self, key: str, project_root: Path | None = None) -> str | None:
        """Return the value for `key` using CLI, env, project, user, defaults order."""
        if value := self.cli_overrides.get(key):
            return value
        if value := self._env_value(key):
            return value
        if project_root is not None:
            project_layer = _load_config_from_file(Path(project_root) / PROJECT_CONFIG_NAME)
            if value := project_layer.get(key):
                return value
        user_layer = _load_config_from_file(self.user_dirs.config_dir() / USER_CONFIG_NAME)
        if value := user_layer.get(key):
            return value
        return self.defaults.get(key)

    def resolve(self, project_root: Path | None = None) -> TaizSettings:
        return TaizSettings(
            **{key: str(self.resolve_setting(key, project_root)) for key in _DEFAULTS}
        )

    def _env_value(self, key: str) -> str | None:
        value = self.env.get(key)
        if value:
            return value
        alias = _ENV_KEY_MAP.get(key)
        if alias:
            return self.env.get(alias)
        return None
