"""Descriptor for one taiz project root and the services bound to it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .installer import Installer
from .manifest import ManifestStore
from .runner import ProcessRunner
from .settings import SettingsResolver, TaizSettings


@dataclass(frozen=True)
class Project:
    """Everything a command needs to act on an explicit project root."""

    root: Path
    settings: TaizSettings
    store: ManifestStore
    runner: ProcessRunner
    installer: Installer

    @classmethod
    def open(
        cls,
        root: Path | str,
        *,
        runner: ProcessRunner | None = None,
        resolver: SettingsResolver | None = None,
    ) -> "Project":
        resolved_root = Path(root).expanduser().resolve()
        settings = (resolver or SettingsResolver()).resolve(resolved_root)
        runner = runner or ProcessRunner()
        return cls(
            root=resolved_root,
            settings=settings,
            store=ManifestStore(
                resolved_root,
                manifest_name=settings.manifest_file,
                lock_name=settings.lock_file,
            ),
            runner=runner,
            installer=Installer(
                runner,
                resolved_root,
                fallback_version=settings.fallback_version,
            ),
        )
