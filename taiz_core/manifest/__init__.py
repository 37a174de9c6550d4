"""Project manifest and lockfile persistence."""

from .models import (
    DEFAULT_SCRIPTS,
    DEFAULT_VERSION,
    INTEGRITY_PLACEHOLDER,
    LOCKFILE_VERSION,
    LockEntry,
    Lockfile,
    ProjectManifest,
)
from .store import LOCK_FILE_NAME, MANIFEST_FILE_NAME, ManifestStore

__all__ = [
    "DEFAULT_SCRIPTS",
    "DEFAULT_VERSION",
    "INTEGRITY_PLACEHOLDER",
    "LOCKFILE_VERSION",
    "LOCK_FILE_NAME",
    "MANIFEST_FILE_NAME",
    "LockEntry",
    "Lockfile",
    "ManifestStore",
    "ProjectManifest",
]
