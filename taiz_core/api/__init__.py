"""Convenience imports for taiz API helpers."""

from .abc import TaizAbstractCommand
from .decorators import taizcommand

__all__ = [
    "TaizAbstractCommand",
    "taizcommand",
]
