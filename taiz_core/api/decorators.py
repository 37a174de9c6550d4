"""Decorator that marks taiz command classes with metadata."""

from __future__ import annotations

from typing import Any, Callable, Sequence, Type

from .abc import TaizAbstractCommand

_FeatureCandidate = Type[Any]


def _attach_feature_metadata(
    cls: type,
    kind: str,
    *,
    name: str | None,
    group: str | None,
    aliases: Sequence[str],
) -> type:
    if not isinstance(cls, type):
        raise TypeError("Decorated object must be a class.")

    metadata = {
        "kind": kind,
        "name": name or cls.__name__.lower(),
        "group": group or "taiz",
        "aliases": tuple(aliases),
    }
    metadata["qualified_name"] = f"{metadata['group']}:{metadata['name']}"
    setattr(cls, "__taiz_feature__", metadata)
    return cls


def taizcommand(
    cls: _FeatureCandidate | None = None,
    *,
    name: str | None = None,
    group: str | None = None,
    aliases: Sequence[str] = (),
) -> Callable[[_FeatureCandidate], _FeatureCandidate] | _FeatureCandidate:
    def wrap(target: _FeatureCandidate) -> _FeatureCandidate:
        if not issubclass(target, TaizAbstractCommand):
            raise TypeError(
                f"{target.__name__} must subclass TaizAbstractCommand to be registered as command."
            )
        return _attach_feature_metadata(target, "command", name=name, group=group, aliases=aliases)

    if cls is None:
        return wrap
    return wrap(cls)
