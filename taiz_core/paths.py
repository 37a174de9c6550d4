"""Platform-independent helpers for taiz paths."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

_DEFAULT_APP_NAME = "taiz"


@dataclass(frozen=True)
class UserDirs:
    """Expose the platform-configured location of the user config tree."""

    app_name: str = _DEFAULT_APP_NAME
    config_dir_override: Path | None = None

    def config_dir(self) -> Path:
        return (
            self.config_dir_override
            if self.config_dir_override
            else Path(user_config_dir(self.app_name, appauthor=False))
        )
