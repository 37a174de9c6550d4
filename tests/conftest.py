"""Shared fixtures for taiz tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Sequence

import pytest

from taiz_core.builtins import commands as commands_mod
from taiz_core.errors import ToolUnavailableError
from taiz_core.runner import CommandResult, ProcessRunner


class FakeRunner(ProcessRunner):
    """Records commands instead of spawning them."""

    def __init__(
        self,
        *,
        missing: Iterable[str] = (),
        failing: Iterable[Sequence[str]] = (),
        outputs: Mapping[Sequence[str], str] | None = None,
    ) -> None:
        self.missing = set(missing)
        self.failing = [tuple(prefix) for prefix in failing]
        self.outputs = {tuple(prefix): text for prefix, text in (outputs or {}).items()}
        self.calls: list[list[str]] = []
        self.captured: list[list[str]] = []

    def tool_available(self, tool: str) -> bool:
        return tool not in self.missing

    def run(self, args, *, cwd=None, capture=False) -> CommandResult:
        command = list(args)
        if command[0] in self.missing:
            raise ToolUnavailableError(command[0])
        (self.captured if capture else self.calls).append(command)
        code = 1 if self._matches(command, self.failing) else 0
        output = None
        if capture:
            output = ""
            for prefix, text in self.outputs.items():
                if tuple(command[: len(prefix)]) == prefix:
                    output = text
                    break
        return CommandResult(exit_code=code, output=output)

    @staticmethod
    def _matches(command: list[str], prefixes: list[tuple[str, ...]]) -> bool:
        return any(tuple(command[: len(prefix)]) == prefix for prefix in prefixes)


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    runner = FakeRunner()
    monkeypatch.setattr(commands_mod, "ProcessRunner", lambda: runner)
    return runner


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in ("TAIZ_MANIFEST", "TAIZ_LOCKFILE", "TAIZ_FALLBACK_VERSION", "TAIZ_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(
        "taiz_core.paths.user_config_dir",
        lambda *args, **kwargs: str(tmp_path / "user-config"),
    )


@pytest.fixture
def runner_factory():
    return FakeRunner
