"""Load, save and mutate the project manifest and lockfile."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, TypeVar

import yaml

from taiz_core.ecosystems import Ecosystem, toolchain_for
from taiz_core.errors import ManifestParseError

from .models import LockEntry, Lockfile, ProjectManifest

logger = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "taiz.yaml"
LOCK_FILE_NAME = "taiz-lock.yaml"

_T = TypeVar("_T")


def _ecosystem_key(ecosystem: "str | Ecosystem") -> str:
    if isinstance(ecosystem, Ecosystem):
        return ecosystem.value
    return str(ecosystem)


def _prune(tree: dict[str, dict[str, Any]], ecosystem: str, name: str) -> bool:
    packages = tree.get(ecosystem)
    if packages is None or name not in packages:
        return False
    del packages[name]
    if not packages:
        del tree[ecosystem]
    return True


class ManifestStore:
    """File-backed access to ``taiz.yaml`` and ``taiz-lock.yaml`` in one project root.

    Every mutation reads both documents, edits them in memory and rewrites
    them in full. There is no locking; the last writer wins.
    """

    def __init__(
        self,
        root: Path | str,
        *,
        manifest_name: str = MANIFEST_FILE_NAME,
        lock_name: str = LOCK_FILE_NAME,
    ) -> None:
        self.root = Path(root)
        self.manifest_path = self.root / manifest_name
        self.lock_path = self.root / lock_name

    def exists(self) -> bool:
        return self.manifest_path.is_file()

    # ---------- documents ----------

    def load(self) -> ProjectManifest:
        return self._read(self.manifest_path, ProjectManifest.from_dict, ProjectManifest)

    def save(self, manifest: ProjectManifest) -> None:
        self._write(self.manifest_path, manifest.to_dict())

    def load_lock(self) -> Lockfile:
        return self._read(self.lock_path, Lockfile.from_dict, Lockfile)

    def save_lock(self, lockfile: Lockfile) -> None:
        self._write(self.lock_path, lockfile.to_dict())

    # ---------- mutations ----------

    def initialize(self, name: str | None = None, project_types: Iterable[str] = ()) -> ProjectManifest:
        """Write a fresh default manifest and an empty lockfile."""
        manifest = ProjectManifest(name=name or self.root.resolve().name)
        for project_type in project_types:
            if project_type not in manifest.project_types:
                manifest.project_types.append(project_type)
        self.save(manifest)
        self.save_lock(Lockfile())
        return manifest

    def add_dependency(
        self,
        name: str,
        version: str,
        ecosystem: "str | Ecosystem",
        *,
        dev: bool = False,
    ) -> None:
        """Record ``name`` as ``^version`` in the manifest and exactly in the lockfile."""
        toolchain = toolchain_for(ecosystem)
        key = toolchain.ecosystem.value
        manifest = self.load()
        lockfile = self.load_lock()

        manifest.bucket(dev).setdefault(key, {})[name] = f"^{version}"
        lockfile.bucket(dev).setdefault(key, {})[name] = LockEntry(
            version=version,
            resolved=toolchain.resolved_url(name, version),
            project_type=key,
        )

        self.save(manifest)
        self.save_lock(lockfile)
        logger.debug("recorded %s@%s under %s (dev=%s)", name, version, key, dev)

    def remove_dependency(self, name: str, ecosystem: "str | Ecosystem") -> bool:
        """Drop ``name`` from both buckets of both files, pruning empty ecosystems.

        Returns ``False`` and writes nothing when neither file listed it.
        """
        key = _ecosystem_key(ecosystem)
        manifest = self.load()
        lockfile = self.load_lock()

        manifest_changed = False
        lock_changed = False
        for dev in (False, True):
            manifest_changed |= _prune(manifest.bucket(dev), key, name)
            lock_changed |= _prune(lockfile.bucket(dev), key, name)

        if manifest_changed:
            self.save(manifest)
        if lock_changed:
            self.save_lock(lockfile)
        return manifest_changed or lock_changed

    def has_dependency(self, name: str, ecosystem: "str | Ecosystem") -> bool:
        key = _ecosystem_key(ecosystem)
        manifest = self.load()
        return any(name in manifest.bucket(dev).get(key, {}) for dev in (False, True))

    # ---------- helpers ----------

    def _read(
        self,
        path: Path,
        parse: Callable[[Any], _T],
        default: Callable[[], _T],
    ) -> _T:
        if not path.exists():
            return default()
        text = path.read_text(encoding="utf-8")
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ManifestParseError(path, str(exc)) from exc
        if raw is None:
            return default()
        if not isinstance(raw, dict):
            raise ManifestParseError(path, "top-level document must be a mapping")
        try:
            return parse(raw)
        except ValueError as exc:
            raise ManifestParseError(path, str(exc)) from exc

    def _write(self, path: Path, payload: dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(payload, sort_keys=False, allow_unicode=True, indent=2),
            encoding="utf-8",
        )
