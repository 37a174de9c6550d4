"""Capability records for the supported language ecosystems."""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Sequence

logger = logging.getLogger(__name__)

__all__ = [
    "Ecosystem",
    "EcosystemToolchain",
    "TOOLCHAINS",
    "ordered_toolchains",
    "toolchain_for",
]


class Ecosystem(str, Enum):
    """Supported ecosystems, in detection order."""

    NODE = "node"
    PYTHON = "python"
    RUST = "rust"
    GO = "go"

    @classmethod
    def parse(cls, value: "str | Ecosystem") -> "Ecosystem":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"unknown ecosystem: {value}") from exc


class EcosystemToolchain(ABC):
    """Describes how taiz drives one ecosystem's native tooling."""

    ecosystem: Ecosystem
    marker_files: tuple[str, ...]
    tool: str
    dev_guidance: tuple[str, ...] = ()
    build_guidance: tuple[str, ...] = ()
    uninstall_guidance: tuple[str, ...] = ()

    @abstractmethod
    def install_args(self, module: str, *, dev: bool = False, global_: bool = False) -> list[str]:
        """Return the argv that installs ``module``."""

    def uninstall_args(self, module: str) -> list[str] | None:
        """Return the argv that removes ``module``; ``None`` when unsupported."""
        return None

    def version_query_args(self, module: str) -> list[str] | None:
        """Return the argv whose output reveals the installed version."""
        return None

    def parse_version(self, output: str) -> str | None:
        lines = [line.strip() for line in output.splitlines() if line.strip()]
        return lines[-1] if lines else None

    @abstractmethod
    def dev_args(self, root: Path) -> list[str] | None:
        """Return the argv that starts a dev server, or ``None`` for guidance."""

    @abstractmethod
    def build_args(self, root: Path) -> list[str] | None:
        """Return the argv that builds the project, or ``None`` for guidance."""

    @abstractmethod
    def resolved_url(self, module: str, version: str) -> str:
        """Placeholder source URL recorded in the lockfile."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.ecosystem.value}>"


def _package_json_scripts(root: Path) -> dict[str, Any]:
    path = root / "package.json"
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        logger.warning("unable to parse %s: %s", path, exc)
        return {}
    scripts = payload.get("scripts") if isinstance(payload, dict) else None
    return scripts if isinstance(scripts, dict) else {}


class NodeToolchain(EcosystemToolchain):
    ecosystem = Ecosystem.NODE
    marker_files = ("package.json",)
    tool = "npm"
    dev_guidance = (
        "No dev or start script found in package.json",
        'Add a "dev" script to package.json or use "taiz run <script>"',
    )
    build_guidance = (
        "No build script found in package.json",
        'Add a "build" script to package.json for actual building.',
    )

    def install_args(self, module: str, *, dev: bool = False, global_: bool = False) -> list[str]:
        args = ["npm", "install"]
        if global_:
            args.append("-g")
        elif dev:
            args.append("--save-dev")
        args.append(module)
        return args

    def uninstall_args(self, module: str) -> list[str] | None:
        return ["npm", "uninstall", module]

    def version_query_args(self, module: str) -> list[str] | None:
        return ["npm", "view", module, "version"]

    def dev_args(self, root: Path) -> list[str] | None:
        scripts = _package_json_scripts(root)
        for name in ("dev", "start"):
            if scripts.get(name):
                return ["npm", "run", name]
        return None

    def build_args(self, root: Path) -> list[str] | None:
        if _package_json_scripts(root).get("build"):
            return ["npm", "run", "build"]
        return None

    def resolved_url(self, module: str, version: str) -> str:
        tarball = module.rsplit("/", 1)[-1]
        return f"https://registry.npmjs.org/{module}/-/{tarball}-{version}.tgz"


_PIP_INDEX_RE = re.compile(r"^\S+\s+\(([^)]+)\)")


class PythonToolchain(EcosystemToolchain):
    ecosystem = Ecosystem.PYTHON
    marker_files = ("requirements.txt", "pyproject.toml", "setup.py")
    tool = "pip"
    entry_files = ("app.py", "main.py", "server.py", "manage.py")
    dev_guidance = (
        "No common Python entry file found (app.py, main.py, server.py, manage.py)",
        "Create one of these files or add a custom dev script to taiz.yaml",
    )
    build_guidance = (
        "Python projects have no generic build command.",
        "Use setuptools, poetry or another build tool, or add a custom build script to taiz.yaml",
    )

    def install_args(self, module: str, *, dev: bool = False, global_: bool = False) -> list[str]:
        args = ["pip", "install"]
        if global_:
            args.append("--user")
        args.append(module)
        return args

    def uninstall_args(self, module: str) -> list[str] | None:
        return ["pip", "uninstall", "-y", module]

    def version_query_args(self, module: str) -> list[str] | None:
        return ["pip", "index", "versions", module]

    def parse_version(self, output: str) -> str | None:
        for line in output.splitlines():
            match = _PIP_INDEX_RE.match(line.strip())
            if match:
                return match.group(1).strip()
        return None

    def dev_args(self, root: Path) -> list[str] | None:
        for name in self.entry_files:
            if (root / name).is_file():
                args = ["python", name]
                if name == "manage.py":
                    args.append("runserver")
                return args
        return None

    def build_args(self, root: Path) -> list[str] | None:
        return None

    def resolved_url(self, module: str, version: str) -> str:
        return f"https://pypi.org/project/{module}/{version}/"


class RustToolchain(EcosystemToolchain):
    ecosystem = Ecosystem.RUST
    marker_files = ("Cargo.toml",)
    tool = "cargo"

    def install_args(self, module: str, *, dev: bool = False, global_: bool = False) -> list[str]:
        if global_:
            return ["cargo", "install", module]
        args = ["cargo", "add"]
        if dev:
            args.append("--dev")
        args.append(module)
        return args

    def uninstall_args(self, module: str) -> list[str] | None:
        return ["cargo", "remove", module]

    def version_query_args(self, module: str) -> list[str] | None:
        return ["cargo", "pkgid", module]

    def parse_version(self, output: str) -> str | None:
        # registry+https://...#serde@1.0.197 (older cargo: ...#serde:1.0.197)
        pkgid = super().parse_version(output)
        if not pkgid:
            return None
        for separator in ("@", ":"):
            if separator in pkgid:
                candidate = pkgid.rsplit(separator, 1)[-1].strip()
                if candidate and candidate[0].isdigit():
                    return candidate
        return None

    def dev_args(self, root: Path) -> list[str] | None:
        return ["cargo", "run"]

    def build_args(self, root: Path) -> list[str] | None:
        return ["cargo", "build", "--release"]

    def resolved_url(self, module: str, version: str) -> str:
        return f"https://crates.io/api/v1/crates/{module}/{version}/download"


class GoToolchain(EcosystemToolchain):
    ecosystem = Ecosystem.GO
    marker_files = ("go.mod",)
    tool = "go"
    uninstall_guidance = (
        "Go modules are managed in go.mod.",
        "Remove the require line manually and run 'go mod tidy'.",
    )

    def install_args(self, module: str, *, dev: bool = False, global_: bool = False) -> list[str]:
        if global_:
            target = module if "@" in module else f"{module}@latest"
            return ["go", "install", target]
        return ["go", "get", module]

    def version_query_args(self, module: str) -> list[str] | None:
        return ["go", "list", "-m", "-f", "{{.Version}}", module.split("@", 1)[0]]

    def parse_version(self, output: str) -> str | None:
        version = super().parse_version(output)
        if not version:
            return None
        return version[1:] if version.startswith("v") else version

    def dev_args(self, root: Path) -> list[str] | None:
        return ["go", "run", "."]

    def build_args(self, root: Path) -> list[str] | None:
        return ["go", "build"]

    def resolved_url(self, module: str, version: str) -> str:
        return f"https://proxy.golang.org/{module.lower()}/@v/v{version}.zip"


TOOLCHAINS: dict[Ecosystem, EcosystemToolchain] = {
    toolchain.ecosystem: toolchain
    for toolchain in (NodeToolchain(), PythonToolchain(), RustToolchain(), GoToolchain())
}


def toolchain_for(ecosystem: "str | Ecosystem") -> EcosystemToolchain:
    """Return the capability record for ``ecosystem``."""
    return TOOLCHAINS[Ecosystem.parse(ecosystem)]


def ordered_toolchains() -> Sequence[EcosystemToolchain]:
    return tuple(TOOLCHAINS[ecosystem] for ecosystem in Ecosystem)
