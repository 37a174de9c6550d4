"""Lightweight application object that wires together taiz core services."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from taiz_core.builtins import register_builtin_commands
from taiz_core.paths import UserDirs
from taiz_core.registry import FeatureRegistry
from taiz_core.settings import SettingsResolver, TaizSettings


@dataclass(frozen=True)
class TaizAppStatus:
    root: Path
    manifest_path: Path
    commands: Sequence[str]


class TaizApp:
    """Entry point that glues settings, logging and the command registry."""

    def __init__(
        self,
        *,
        start_dir: Path | str | None = None,
        user_dirs: UserDirs | None = None,
        env: Mapping[str, str] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("taiz_core.app")
        self.root = (Path(start_dir) if start_dir else Path.cwd()).resolve()
        self.settings_resolver = SettingsResolver(user_dirs=user_dirs, env=env)
        self.settings: TaizSettings = self.settings_resolver.resolve(self.root)
        self.feature_registry = FeatureRegistry()
        self._builtins_registered = False

    def _register_builtins(self) -> None:
        if self._builtins_registered:
            return
        register_builtin_commands(self.feature_registry)
        self._builtins_registered = True

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=self.settings.log_level_value,
            format="%(levelname)s %(name)s: %(message)s",
        )
        self.logger.debug("log level set to %s", self.settings.log_level)

    def bootstrap(self) -> TaizAppStatus:
        self._register_builtins()
        return TaizAppStatus(
            root=self.root,
            manifest_path=self.root / self.settings.manifest_file,
            commands=self.feature_registry.display_names(),
        )
