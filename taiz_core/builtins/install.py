"""Builtin install command."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace

from taiz_core import console
from taiz_core.api import taizcommand
from taiz_core.detector import detect_ecosystems, is_polyglot
from taiz_core.ecosystems import Ecosystem, ordered_toolchains
from taiz_core.errors import (
    ExternalCommandError,
    MissingManifestError,
    NoEcosystemDetectedError,
    TaizError,
    ToolUnavailableError,
)
from taiz_core.project import Project

from .commands import _ProjectCommand, report_polyglot


@taizcommand(name="install", aliases=("i",))
class InstallCommand(_ProjectCommand):
    """Install dependencies. Without a module, installs everything listed in taiz.yaml."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument("module", nargs="?", help="Package to install")
        parser.add_argument(
            "-g",
            "--global",
            dest="global_",
            action="store_true",
            help="Install globally",
        )
        parser.add_argument(
            "-D",
            "--dev",
            action="store_true",
            help="Record the package under devDependencies",
        )
        cls.add_project_argument(parser)

    def run(self, argv: Namespace) -> int:
        project = self._open(argv)
        module = getattr(argv, "module", None)
        global_ = bool(getattr(argv, "global_", False))

        if not module:
            if global_:
                console.warn(
                    "install",
                    "Cannot install all dependencies globally. Specify a module name for global installation.",
                )
                return 0
            return self._install_all(project)
        if global_:
            return self._install_global(project, module)
        return self._install_local(project, module, dev=bool(getattr(argv, "dev", False)))

    def _install_all(self, project: Project) -> int:
        store = project.store
        if not store.exists():
            raise MissingManifestError(store.manifest_path)
        console.info("install", f"Installing all dependencies from {store.manifest_path.name}...")
        manifest = store.load()
        if not manifest.dependencies and not manifest.dev_dependencies:
            console.warn("install", f"No dependencies found in {store.manifest_path.name}")
            return 0

        installer = project.installer
        total = 0
        for dev in (False, True):
            label = "dev dependencies" if dev else "dependencies"
            for ecosystem, packages in manifest.bucket(dev).items():
                try:
                    installer.ensure_tool(ecosystem)
                except ValueError:
                    console.warn("install", f"Skipping {ecosystem} {label} - unknown project type")
                    continue
                except ToolUnavailableError as exc:
                    console.warn("install", f"Skipping {ecosystem} {label} - {exc}")
                    continue

                console.info("install", f"Installing {ecosystem} {label}...")
                suffix = " (dev)" if dev else ""
                for package in packages:
                    console.note("install", f"Installing {package}{suffix}...")
                    try:
                        installer.install_package(package, ecosystem, dev=dev)
                    except (ExternalCommandError, ToolUnavailableError) as exc:
                        console.warn("install", f"✗ Failed to install {package}: {exc}")
                        continue
                    console.success("install", f"✓ {package}{suffix}")
                    total += 1

        console.success("install", f"✓ Installed {total} packages")
        return 0

    def _install_global(self, project: Project, module: str) -> int:
        console.info("install", f"Installing {module} globally...")
        console.note("install", "Global installation - checking available package managers...")
        installer = project.installer
        installed = 0
        last_error: TaizError | None = None

        for toolchain in ordered_toolchains():
            name = toolchain.ecosystem.value
            if not installer.tool_available(toolchain.ecosystem):
                console.note("install", f"{toolchain.tool} not found, skipping {name}")
                continue
            console.info("install", f"Installing {module} in {name} ecosystem...")
            try:
                installer.install_package(module, toolchain.ecosystem, global_=True)
            except (ExternalCommandError, ToolUnavailableError) as exc:
                console.warn("install", f"⚠ Failed to install in {name}: {exc}")
                last_error = exc
                continue
            version = installer.query_version(module, toolchain.ecosystem)
            console.success("install", f"✓ Installed {module}@{version} globally in {name}")
            installed += 1

        if installed:
            return 0
        console.error("install", "Failed to install in any ecosystem")
        if last_error is None:
            raise ToolUnavailableError(", ".join(t.tool for t in ordered_toolchains()))
        raise last_error

    def _install_local(self, project: Project, module: str, *, dev: bool) -> int:
        store = project.store
        if not store.exists():
            raise MissingManifestError(store.manifest_path)
        console.info("install", f"Installing {module}...")

        detected = detect_ecosystems(project.root)
        if not detected:
            raise NoEcosystemDetectedError(project.root, "install packages")
        primary = detected[0]
        ecosystem: Ecosystem = primary.ecosystem
        console.note("install", f"Installing in {primary.name} project...")

        installer = project.installer
        installer.ensure_tool(ecosystem)
        installer.install_package(module, ecosystem, dev=dev)
        version = installer.query_version(module, ecosystem)
        store.add_dependency(module, version, ecosystem, dev=dev)

        console.success("install", f"✓ Installed {module}@{version}")
        console.success("install", f"✓ Updated {store.manifest_path.name}")
        console.success("install", f"✓ Updated {store.lock_path.name}")
        if is_polyglot(project.root):
            report_polyglot("install", primary, detected, "Installed in")
        return 0
