"""Scalar value merging used by element merges."""

from __future__ import annotations

from collections.abc import Mapping


def merge_values[T](target: T | None, source: T | None) -> T | None:
    """Combine a stored value with an incoming one.

    The incoming value wins unless it is ``None``. Two mappings are merged key by
    key (recursively), keeping stored keys the incoming mapping does not mention.
    """

    if source is None:
        return target
    if isinstance(target, Mapping) and isinstance(source, Mapping):
        return merge_mappings(target, source)  # pyright: ignore[reportUnknownArgumentType,reportReturnType]
    return source


def merge_mappings(
    target: Mapping[str, object] | None, source: Mapping[str, object] | None
) -> dict[str, object] | None:
    if source is None:
        return dict(target) if target is not None else None
    if target is None:
        return dict(source)
    merged = dict(target)
    for key, value in source.items():
        merged[key] = merge_values(target.get(key), value)
    return merged
