"""Utility helpers for deep merges of plain data."""
from __future__ import annotations

import copy
from typing import Any, Sequence

from .unit import NodeKind, classify


def merge_obj_deep(target: Any, source: Any) -> Any:
    """
    Merge ``source`` into ``target`` and return ``target``.

    ``target`` is mutated by rebinding its keys; nested mappings it owns are
    shallow-copied before they are merged into, and ``source`` is never
    mutated. When either side is not a mapping, ``source`` is returned as is.

    Merge rules per key of ``source``:

    * both values are sequences: concatenation, target items first;
    * both values are mappings: recursive merge into a copy of the target value;
    * anything else: the source value replaces the target value.
    """
    if classify(target) is not NodeKind.MAPPING or classify(source) is not NodeKind.MAPPING:
        return source

    for key, source_value in source.items():
        target_value = target.get(key)
        kinds = (classify(target_value), classify(source_value))

        if kinds == (NodeKind.SEQUENCE, NodeKind.SEQUENCE):
            target[key] = _concat(target_value, source_value)
        elif kinds == (NodeKind.MAPPING, NodeKind.MAPPING):
            target[key] = merge_obj_deep(copy.copy(target_value), source_value)
        else:
            target[key] = source_value

    return target


def merge_obj_deep_all(target: Any, *sources: Any) -> Any:
    """Fold ``sources`` into ``target`` left to right."""
    merged = target
    for source in sources:
        merged = merge_obj_deep(merged, source)
    return merged


def _concat(head: Sequence[Any], tail: Sequence[Any]) -> Sequence[Any]:
    if type(head) is type(tail):
        return head + tail  # type: ignore[operator]
    return [*head, *tail]
