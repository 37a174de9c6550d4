"""Core runtime pieces for the taiz polyglot package dispatcher."""

from .app import TaizApp, TaizAppStatus
from .detector import DetectedEcosystem, detect_ecosystems, primary_ecosystem
from .ecosystems import Ecosystem, toolchain_for
from .manifest import Lockfile, ManifestStore, ProjectManifest
from .paths import UserDirs
from .project import Project
from .runner import CommandResult, ProcessRunner
from .settings import SettingsResolver, TaizSettings

__all__ = [
    "TaizApp",
    "TaizAppStatus",
    "DetectedEcosystem",
    "detect_ecosystems",
    "primary_ecosystem",
    "Ecosystem",
    "toolchain_for",
    "Lockfile",
    "ManifestStore",
    "ProjectManifest",
    "UserDirs",
    "Project",
    "CommandResult",
    "ProcessRunner",
    "SettingsResolver",
    "TaizSettings",
]
