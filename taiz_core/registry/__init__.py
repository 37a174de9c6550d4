"""Convenience exports for the registry helpers."""

from .entry import TaizRegistryEntry
from .errors import (
    AmbiguousFeatureError,
    FeatureCollisionError,
    FeatureNotFoundError,
    FeatureRegistryError,
)
from .registry import FeatureRegistry

__all__ = [
    "TaizRegistryEntry",
    "FeatureRegistry",
    "FeatureRegistryError",
    "FeatureCollisionError",
    "FeatureNotFoundError",
    "AmbiguousFeatureError",
]
