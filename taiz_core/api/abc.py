"""Abstract base class for taiz commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace


class TaizAbstractCommand(ABC):
    """Base interface for taiz commands."""

    @classmethod
    @abstractmethod
    def configure(cls, parser: ArgumentParser) -> None:
        """Let the command configure CLI arguments."""

    @abstractmethod
    def run(self, argv: Namespace) -> int:
        """Execute the command with parsed arguments."""
