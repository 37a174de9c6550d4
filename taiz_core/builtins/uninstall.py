"""Builtin uninstall command."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace

from taiz_core import console
from taiz_core.api import taizcommand
from taiz_core.detector import detect_ecosystems, is_polyglot
from taiz_core.errors import MissingManifestError, NoEcosystemDetectedError

from .commands import _ProjectCommand, report_polyglot


@taizcommand(name="uninstall")
class UninstallCommand(_ProjectCommand):
    """Remove a dependency and update taiz.yaml."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument("module", help="Package to remove")
        cls.add_project_argument(parser)

    def run(self, argv: Namespace) -> int:
        project = self._open(argv)
        module = str(argv.module)
        store = project.store
        console.info("uninstall", f"Uninstalling {module}...")
        if not store.exists():
            raise MissingManifestError(store.manifest_path)

        detected = detect_ecosystems(project.root)
        if not detected:
            raise NoEcosystemDetectedError(project.root, "uninstall packages")
        primary = detected[0]
        console.note("uninstall", f"Uninstalling from {primary.name} project...")

        installer = project.installer
        installer.ensure_tool(primary.ecosystem)

        if not store.has_dependency(module, primary.ecosystem):
            console.warn("uninstall", f"{module} is not listed in {store.manifest_path.name} dependencies")
            console.note("uninstall", "Proceeding with uninstall anyway...")

        installer.uninstall_package(module, primary.ecosystem)
        store.remove_dependency(module, primary.ecosystem)

        console.success("uninstall", f"✓ Uninstalled {module}")
        console.success("uninstall", f"✓ Updated {store.manifest_path.name}")
        console.success("uninstall", f"✓ Updated {store.lock_path.name}")
        if is_polyglot(project.root):
            report_polyglot("uninstall", primary, detected, "Uninstalled from")
        return 0
