"""Built-in commands that manage the project itself."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Sequence

from taiz_core import console
from taiz_core.api import TaizAbstractCommand, taizcommand
from taiz_core.detector import DetectedEcosystem, detect_ecosystems
from taiz_core.project import Project
from taiz_core.runner import ProcessRunner
from taiz_core.settings import SettingsResolver


class _ProjectCommand(TaizAbstractCommand):
    """Commands that act on an explicit project root."""

    def __init__(self) -> None:
        self.resolver = SettingsResolver()
        self.runner = ProcessRunner()
        self.project: Project | None = None

    @staticmethod
    def add_project_argument(parser: ArgumentParser) -> None:
        parser.add_argument(
            "--project-dir",
            "-C",
            dest="project_dir",
            default=".",
            help="Project root directory (default: current folder)",
        )

    def _open(self, argv: Namespace) -> Project:
        requested = getattr(argv, "project_dir", None) or "."
        self.project = Project.open(Path(requested), runner=self.runner, resolver=self.resolver)
        return self.project


def report_polyglot(
    scope: str,
    primary: DetectedEcosystem,
    detected: Sequence[DetectedEcosystem],
    action: str,
) -> None:
    """Mention the non-primary ecosystems; nothing is done with them."""
    others = [item.name for item in detected if item.ecosystem is not primary.ecosystem]
    if not others:
        return
    console.info(scope, "Polyglot project detected!")
    console.note(scope, f"{action} {primary.name}. Other detected types: {', '.join(others)}")
    console.note(scope, "Run the command in those project contexts to manage their dependencies.")


@taizcommand(name="init")
class InitCommand(_ProjectCommand):
    """Initialize a new project with taiz.yaml config."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        cls.add_project_argument(parser)
        parser.add_argument("--name", help="Project name (default: directory name)")

    def run(self, argv: Namespace) -> int:
        project = self._open(argv)
        store = project.store
        console.info("init", f"Initializing taiz project in {project.root}")
        console.note("init", "Detecting project types...")
        detected = detect_ecosystems(project.root)

        if not detected:
            console.warn("init", "No existing project files detected. Creating generic taiz project.")
        else:
            names = ", ".join(item.name for item in detected)
            console.success("init", f"Detected project types: {names}")
            for item in detected:
                console.note("init", f"  - {item.name}: found {item.detected_file}")

        if store.exists():
            console.warn("init", f"Overwriting existing {store.manifest_path.name}")
        store.initialize(
            name=getattr(argv, "name", None),
            project_types=[item.name for item in detected],
        )

        console.success("init", f"Created {store.manifest_path.name}")
        console.success("init", f"Created {store.lock_path.name}")
        console.info("init", "Project initialized successfully!")

        if detected:
            console.note("init", "You can now use:")
            console.note("init", "  taiz install <module>  - Install dependencies")
            console.note("init", "  taiz dev               - Start development server")
            console.note("init", "  taiz run <script>      - Run custom scripts")
        return 0


@taizcommand(name="help")
class HelpCommand(TaizAbstractCommand):
    """Display the list of available commands."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--long",
            action="store_true",
            dest="long_format",
            help="Show detailed help about each command.",
        )

    def run(self, argv: Namespace) -> int:
        self.long_format = bool(getattr(argv, "long_format", False))
        return 0
