"""Builtin dev, build and run commands."""

from __future__ import annotations

from abc import abstractmethod
from argparse import ArgumentParser, Namespace
from pathlib import Path

from taiz_core import console
from taiz_core.api import taizcommand
from taiz_core.detector import require_primary
from taiz_core.ecosystems import EcosystemToolchain
from taiz_core.errors import ScriptNotFoundError, ToolUnavailableError
from taiz_core.manifest import DEFAULT_SCRIPTS

from .commands import _ProjectCommand


def split_command(command: str) -> list[str]:
    """Split a script on whitespace into program and arguments (no shell quoting)."""
    return command.split()


class _LifecycleCommand(_ProjectCommand):
    """Shared flow for ``dev`` and ``build``: a custom script wins over detection."""

    script_name: str = ""
    progress: str = ""
    action: str = ""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        cls.add_project_argument(parser)

    @abstractmethod
    def ecosystem_args(self, toolchain: EcosystemToolchain, root: Path) -> list[str] | None:
        """Return the ecosystem command, or ``None`` when only guidance applies."""

    @abstractmethod
    def guidance(self, toolchain: EcosystemToolchain) -> tuple[str, ...]:
        """Lines printed when the ecosystem has no generic command."""

    def finished(self) -> None:
        """Hook run after the ecosystem command succeeds."""

    def run(self, argv: Namespace) -> int:
        project = self._open(argv)
        scope = self.script_name
        console.info(scope, f"{self.progress}...")

        manifest = project.store.load()
        custom = manifest.scripts.get(self.script_name, "").strip()
        if custom and custom != DEFAULT_SCRIPTS[self.script_name]:
            console.note(scope, f"Running custom {self.script_name} script: {custom}")
            project.runner.run_checked(split_command(custom), cwd=project.root)
            return 0

        primary = require_primary(project.root, self.action)
        toolchain = primary.toolchain
        console.note(scope, f"Detected {primary.name} project")

        args = self.ecosystem_args(toolchain, project.root)
        if args is None:
            lines = self.guidance(toolchain)
            if lines:
                console.warn(scope, lines[0])
                for line in lines[1:]:
                    console.note(scope, line)
            return 0

        if not project.runner.tool_available(args[0]):
            raise ToolUnavailableError(args[0], primary.name)
        project.runner.run_checked(args, cwd=project.root)
        self.finished()
        return 0


@taizcommand(name="dev")
class DevCommand(_LifecycleCommand):
    """Start development server based on project type."""

    script_name = "dev"
    progress = "Starting development server"
    action = "start development server"

    def ecosystem_args(self, toolchain: EcosystemToolchain, root: Path) -> list[str] | None:
        return toolchain.dev_args(root)

    def guidance(self, toolchain: EcosystemToolchain) -> tuple[str, ...]:
        return toolchain.dev_guidance


@taizcommand(name="build")
class BuildCommand(_LifecycleCommand):
    """Build the project using its ecosystem's build tool."""

    script_name = "build"
    progress = "Building project"
    action = "build project"

    def ecosystem_args(self, toolchain: EcosystemToolchain, root: Path) -> list[str] | None:
        return toolchain.build_args(root)

    def guidance(self, toolchain: EcosystemToolchain) -> tuple[str, ...]:
        return toolchain.build_guidance

    def finished(self) -> None:
        console.success("build", "✓ Build completed successfully")


@taizcommand(name="run")
class RunCommand(_ProjectCommand):
    """Run a script defined in taiz.yaml."""

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument("script", help="Script name from the scripts section")
        cls.add_project_argument(parser)

    def run(self, argv: Namespace) -> int:
        project = self._open(argv)
        name = str(argv.script)
        console.info("run", f"Running script: {name}")

        scripts = project.store.load().scripts
        command = scripts.get(name, "").strip()
        if not command:
            raise ScriptNotFoundError(name, scripts, project.store.manifest_path.name)

        console.note("run", f"Executing: {command}")
        project.runner.run_checked(split_command(command), cwd=project.root)
        console.success("run", f'✓ Script "{name}" completed successfully')
        return 0
