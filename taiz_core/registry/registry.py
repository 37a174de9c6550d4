"""In-memory registry for taiz commands."""

from __future__ import annotations

from .entry import TaizRegistryEntry
from .errors import (
    AmbiguousFeatureError,
    FeatureCollisionError,
    FeatureNotFoundError,
)


class FeatureRegistry:
    """A registry that tracks commands by qualified name, simple name and alias."""

    def __init__(self) -> None:
        self._by_qualified: dict[str, TaizRegistryEntry] = {}
        self._by_name: dict[str, list[TaizRegistryEntry]] = {}
        self._aliases: dict[str, TaizRegistryEntry] = {}

    def register(self, entry: TaizRegistryEntry) -> None:
        """Register an entry, raising on qualified name or alias collisions."""

        qualified = entry.qualified_name
        if qualified in self._by_qualified:
            raise FeatureCollisionError(f"{qualified} is already registered.")
        for alias in entry.aliases:
            if alias in self._aliases or alias in self._by_name:
                raise FeatureCollisionError(f"alias {alias} is already taken.")
        self._by_qualified[qualified] = entry
        self._by_name.setdefault(entry.name, []).append(entry)
        for alias in entry.aliases:
            self._aliases[alias] = entry

    def resolve(self, name_or_qualified: str) -> TaizRegistryEntry:
        """Resolve a simple name, an alias or a qualified ``group:name``."""

        if ":" in name_or_qualified:
            return self._resolve_qualified(name_or_qualified)
        return self._resolve_name(name_or_qualified)

    def _resolve_qualified(self, qualified: str) -> TaizRegistryEntry:
        entry = self._by_qualified.get(qualified)
        if entry is None:
            raise FeatureNotFoundError(qualified)
        return entry

    def _resolve_name(self, name: str) -> TaizRegistryEntry:
        candidates = self._by_name.get(name)
        if not candidates:
            alias = self._aliases.get(name)
            if alias is not None:
                return alias
            raise FeatureNotFoundError(name)
        if len(candidates) > 1:
            sorted_candidates = sorted(entry.qualified_name for entry in candidates)
            raise AmbiguousFeatureError(name, sorted_candidates)
        return candidates[0]

    def display_names(self) -> tuple[str, ...]:
        """List feature names, showing ``group:name`` when ambiguous."""

        formatted: list[str] = []
        for name in sorted(self._by_name):
            candidates = self._by_name[name]
            if len(candidates) == 1:
                formatted.append(name)
                continue
            qualified = sorted(entry.qualified_name for entry in candidates)
            formatted.extend(qualified)
        return tuple(formatted)

    def entries(self) -> tuple[TaizRegistryEntry, ...]:
        """Return all registered entries in qualified order."""

        return tuple(sorted(self._by_qualified.values(), key=lambda entry: entry.qualified_name))
