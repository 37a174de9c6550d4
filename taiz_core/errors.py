"""Typed errors raised by the taiz dispatcher."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence


class TaizError(RuntimeError):
    """Base taiz error.

    ``hints`` carries follow-up lines the CLI prints under the message.
    """

    hints: tuple[str, ...] = ()


class NoEcosystemDetectedError(TaizError):
    """No marker file for a supported ecosystem was found."""

    def __init__(self, root: Path, action: str = "continue") -> None:
        super().__init__(f"No project types detected in {root}. Cannot {action}.")
        self.root = root
        self.hints = (
            "Supported markers: package.json, requirements.txt, pyproject.toml, "
            "setup.py, Cargo.toml, go.mod",
        )


class MissingManifestError(TaizError):
    """The command needs an initialized project."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"No {path.name} found in {path.parent}.")
        self.path = path
        self.hints = ('Run "taiz init" first.',)


class ToolUnavailableError(TaizError):
    """A required external binary is not on PATH."""

    def __init__(self, tool: str, ecosystem: str | None = None) -> None:
        super().__init__(f"{tool} is not installed or not in PATH")
        self.tool = tool
        self.ecosystem = ecosystem
        if ecosystem:
            self.hints = (f"Please install {tool} to manage {ecosystem} dependencies",)


class ExternalCommandError(TaizError):
    """A child process exited with a non-zero code."""

    def __init__(self, args: Sequence[str], exit_code: int) -> None:
        super().__init__(f"Command '{' '.join(args)}' failed with exit code {exit_code}")
        self.command = tuple(args)
        self.exit_code = exit_code


class ScriptNotFoundError(TaizError):
    """The requested script is not declared in the manifest."""

    def __init__(
        self,
        script: str,
        available: Mapping[str, str] | None = None,
        manifest_name: str = "taiz.yaml",
    ) -> None:
        super().__init__(f'Script "{script}" not found in {manifest_name}')
        self.script = script
        self.available = dict(available or {})
        if self.available:
            self.hints = ("Available scripts:",) + tuple(
                f"  - {name}: {command}" for name, command in self.available.items()
            )
        else:
            self.hints = (
                f"No scripts defined in {manifest_name}",
                f'Add scripts to the "scripts" section in {manifest_name}',
            )


class ManifestParseError(TaizError):
    """The manifest or lockfile on disk is not a valid document."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"unable to parse {path}: {detail}")
        self.path = path
