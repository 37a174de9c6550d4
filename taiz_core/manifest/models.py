"""Typed views over ``taiz.yaml`` and ``taiz-lock.yaml``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

DEFAULT_VERSION = "1.0.0"
LOCKFILE_VERSION = 1
DEFAULT_SCRIPTS: dict[str, str] = {
    "dev": "taiz dev",
    "build": "taiz build",
}
# The lockfile never queries a registry, so these fields are labelled placeholders.
INTEGRITY_PLACEHOLDER = "sha512-placeholder"

_MANIFEST_KEYS = (
    "name",
    "version",
    "description",
    "dependencies",
    "devDependencies",
    "scripts",
    "projectTypes",
)
_LOCK_KEYS = ("version", "lockfileVersion", "dependencies", "devDependencies")

DependencyTree = dict[str, dict[str, str]]


def _ensure_mapping(data: Any, label: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return data
    raise ValueError(f"expected mapping for {label}")


def _string(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _dependency_tree(data: Any, label: str) -> DependencyTree:
    tree: DependencyTree = {}
    for ecosystem, packages in _ensure_mapping(data, label).items():
        entries = _ensure_mapping(packages, f"{label}.{ecosystem}")
        tree[str(ecosystem)] = {str(name): _string(spec) for name, spec in entries.items()}
    return tree


@dataclass
class ProjectManifest:
    name: str = ""
    version: str = DEFAULT_VERSION
    description: str = ""
    dependencies: DependencyTree = field(default_factory=dict)
    dev_dependencies: DependencyTree = field(default_factory=dict)
    scripts: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SCRIPTS))
    project_types: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectManifest":
        raw = _ensure_mapping(data, "manifest")
        project_types: list[str] = []
        types_raw = raw.get("projectTypes") or []
        if not isinstance(types_raw, list):
            raise ValueError("expected list for projectTypes")
        for item in types_raw:
            value = str(item)
            if value not in project_types:
                project_types.append(value)
        scripts = {
            str(key): _string(value)
            for key, value in _ensure_mapping(raw.get("scripts"), "scripts").items()
        }
        return cls(
            name=_string(raw.get("name")),
            version=_string(raw.get("version"), DEFAULT_VERSION),
            description=_string(raw.get("description")),
            dependencies=_dependency_tree(raw.get("dependencies"), "dependencies"),
            dev_dependencies=_dependency_tree(raw.get("devDependencies"), "devDependencies"),
            scripts=scripts,
            project_types=project_types,
            extra={str(key): value for key, value in raw.items() if key not in _MANIFEST_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "dependencies": {eco: dict(pkgs) for eco, pkgs in self.dependencies.items()},
            "devDependencies": {eco: dict(pkgs) for eco, pkgs in self.dev_dependencies.items()},
            "scripts": dict(self.scripts),
            "projectTypes": list(self.project_types),
        }
        data.update(self.extra)
        return data

    def bucket(self, dev: bool) -> DependencyTree:
        return self.dev_dependencies if dev else self.dependencies


@dataclass
class LockEntry:
    version: str
    resolved: str
    integrity: str = INTEGRITY_PLACEHOLDER
    project_type: str = ""

    @classmethod
    def from_dict(cls, data: Any, project_type: str) -> "LockEntry":
        raw = _ensure_mapping(data, "lock entry")
        return cls(
            version=_string(raw.get("version")),
            resolved=_string(raw.get("resolved")),
            integrity=_string(raw.get("integrity"), INTEGRITY_PLACEHOLDER),
            project_type=_string(raw.get("projectType"), project_type),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "version": self.version,
            "resolved": self.resolved,
            "integrity": self.integrity,
            "projectType": self.project_type,
        }


LockTree = dict[str, dict[str, LockEntry]]


def _lock_tree(data: Any, label: str) -> LockTree:
    tree: LockTree = {}
    for ecosystem, packages in _ensure_mapping(data, label).items():
        entries = _ensure_mapping(packages, f"{label}.{ecosystem}")
        tree[str(ecosystem)] = {
            str(name): LockEntry.from_dict(entry, str(ecosystem)) for name, entry in entries.items()
        }
    return tree


@dataclass
class Lockfile:
    version: str = DEFAULT_VERSION
    lockfile_version: int = LOCKFILE_VERSION
    dependencies: LockTree = field(default_factory=dict)
    dev_dependencies: LockTree = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Lockfile":
        raw = _ensure_mapping(data, "lockfile")
        try:
            lockfile_version = int(raw.get("lockfileVersion", LOCKFILE_VERSION))
        except (TypeError, ValueError) as exc:
            raise ValueError("lockfileVersion must be an integer") from exc
        return cls(
            version=_string(raw.get("version"), DEFAULT_VERSION),
            lockfile_version=lockfile_version,
            dependencies=_lock_tree(raw.get("dependencies"), "dependencies"),
            dev_dependencies=_lock_tree(raw.get("devDependencies"), "devDependencies"),
            extra={str(key): value for key, value in raw.items() if key not in _LOCK_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "version": self.version,
            "lockfileVersion": self.lockfile_version,
            "dependencies": {
                eco: {name: entry.to_dict() for name, entry in pkgs.items()}
                for eco, pkgs in self.dependencies.items()
            },
            "devDependencies": {
                eco: {name: entry.to_dict() for name, entry in pkgs.items()}
                for eco, pkgs in self.dev_dependencies.items()
            },
        }
        data.update(self.extra)
        return data

    def bucket(self, dev: bool) -> LockTree:
        return self.dev_dependencies if dev else self.dependencies
