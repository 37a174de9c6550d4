"""Install and uninstall packages through each ecosystem's package manager."""

from __future__ import annotations

import logging
from pathlib import Path

from . import console
from .ecosystems import Ecosystem, EcosystemToolchain, toolchain_for
from .errors import TaizError, ToolUnavailableError
from .manifest import DEFAULT_VERSION
from .runner import ProcessRunner

logger = logging.getLogger(__name__)


class Installer:
    """Drive the native package manager for one project root."""

    def __init__(
        self,
        runner: ProcessRunner,
        root: Path | str,
        *,
        fallback_version: str = DEFAULT_VERSION,
    ) -> None:
        self.runner = runner
        self.root = Path(root)
        self.fallback_version = fallback_version

    def tool_available(self, ecosystem: "str | Ecosystem") -> bool:
        return self.runner.tool_available(toolchain_for(ecosystem).tool)

    def ensure_tool(self, ecosystem: "str | Ecosystem") -> EcosystemToolchain:
        toolchain = toolchain_for(ecosystem)
        if not self.runner.tool_available(toolchain.tool):
            raise ToolUnavailableError(toolchain.tool, toolchain.ecosystem.value)
        return toolchain

    def install_package(
        self,
        module: str,
        ecosystem: "str | Ecosystem",
        *,
        dev: bool = False,
        global_: bool = False,
    ) -> None:
        """Run the install command for ``module``; raises on a non-zero exit."""
        toolchain = toolchain_for(ecosystem)
        self.runner.run_checked(
            toolchain.install_args(module, dev=dev, global_=global_),
            cwd=self.root,
        )

    def query_version(self, module: str, ecosystem: "str | Ecosystem") -> str:
        """Ask the ecosystem which version of ``module`` is current.

        Any failure, including an ecosystem without a version query, yields
        the fallback version instead of an error.
        """
        toolchain = toolchain_for(ecosystem)
        args = toolchain.version_query_args(module)
        if args is None:
            return self.fallback_version
        try:
            result = self.runner.run(args, cwd=self.root, capture=True)
        except TaizError as exc:
            logger.debug("version query for %s failed: %s", module, exc)
            return self.fallback_version
        if not result.succeeded:
            logger.debug("version query for %s exited with %s", module, result.exit_code)
            return self.fallback_version
        version = toolchain.parse_version(result.output or "")
        if not version:
            logger.debug("no version in output for %s: %r", module, result.output)
            return self.fallback_version
        return version

    def uninstall_package(self, module: str, ecosystem: "str | Ecosystem") -> bool:
        """Remove ``module``; returns ``False`` when the ecosystem needs manual steps."""
        toolchain = toolchain_for(ecosystem)
        args = toolchain.uninstall_args(module)
        if args is None:
            for line in toolchain.uninstall_guidance:
                console.warn("uninstall", line)
            return False
        self.runner.run_checked(args, cwd=self.root)
        return True
