"""Custom errors raised by the taiz command registry."""

from __future__ import annotations

from typing import Sequence


class FeatureRegistryError(Exception):
    """Base class for feature registry errors."""


class FeatureCollisionError(FeatureRegistryError):
    """Raised when an entry or alias already exists for a name."""


class FeatureNotFoundError(FeatureRegistryError):
    """Raised when a feature cannot be resolved."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is not registered.")
        self.name = name


class AmbiguousFeatureError(FeatureRegistryError):
    """Raised when multiple entries share the same simple name."""

    def __init__(self, name: str, candidates: Sequence[str]) -> None:
        message = f"{name!r} matches multiple entries: {', '.join(candidates)}"
        super().__init__(message)
        self.name = name
        self.candidates = tuple(candidates)
