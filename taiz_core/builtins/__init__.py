"""Helper utilities for registering built-in taiz commands."""

from __future__ import annotations

from typing import Sequence

from taiz_core.registry import FeatureRegistry, TaizRegistryEntry

from .commands import HelpCommand, InitCommand
from .install import InstallCommand
from .scripts import BuildCommand, DevCommand, RunCommand
from .uninstall import UninstallCommand

__all__ = ["register_builtin_commands"]

_BUILTIN_FEATURES: Sequence[type] = (
    InitCommand,
    InstallCommand,
    UninstallCommand,
    DevCommand,
    BuildCommand,
    RunCommand,
    HelpCommand,
)


def register_builtin_commands(registry: FeatureRegistry) -> None:
    """Register the built-in taiz command classes with the supplied registry."""

    for feature in _BUILTIN_FEATURES:
        metadata = getattr(feature, "__taiz_feature__", None)
        if metadata is None:
            continue
        registry.register(
            TaizRegistryEntry(
                group=metadata["group"],
                name=str(metadata["name"]),
                target=feature,
                kind=str(metadata["kind"]),
                aliases=tuple(metadata["aliases"]),
            )
        )
