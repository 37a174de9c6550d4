"""Blocking child-process execution for ecosystem tooling."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from . import console
from .errors import ExternalCommandError, ToolUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    exit_code: int
    output: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class ProcessRunner:
    """Runs one external command at a time and waits for it to exit.

    By default the child inherits the terminal. ``capture=True`` collects
    stdout as text instead, for commands whose output is parsed.
    """

    def tool_available(self, tool: str) -> bool:
        return shutil.which(tool) is not None

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | str | None = None,
        capture: bool = False,
    ) -> CommandResult:
        if not args:
            raise ValueError("command must not be empty")
        command = list(args)
        executable = shutil.which(command[0])
        if executable is None:
            raise ToolUnavailableError(command[0])
        if not capture:
            console.info("run", f"Running: {' '.join(command)}")
        logger.debug("spawn cmd=%s cwd=%s capture=%s", command, cwd, capture)
        try:
            result = subprocess.run(
                [executable, *command[1:]],
                cwd=str(cwd) if cwd is not None else None,
                check=False,
                capture_output=capture,
                text=capture,
                encoding="utf-8" if capture else None,
                errors="replace" if capture else None,
            )
        except FileNotFoundError as exc:
            raise ToolUnavailableError(command[0]) from exc
        logger.debug("exit cmd=%s code=%s", command[0], result.returncode)
        output = None
        if capture:
            output = result.stdout or ""
            if result.stderr:
                logger.debug("stderr cmd=%s: %s", command[0], result.stderr.strip())
        return CommandResult(exit_code=result.returncode, output=output)

    def run_checked(
        self,
        args: Sequence[str],
        *,
        cwd: Path | str | None = None,
        capture: bool = False,
    ) -> CommandResult:
        result = self.run(args, cwd=cwd, capture=capture)
        if not result.succeeded:
            raise ExternalCommandError(args, result.exit_code)
        return result
