"""Type predicates used to classify values before merging."""
from __future__ import annotations

from enum import Enum
from typing import Any


class NodeKind(Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def classify(value: Any) -> NodeKind:
    """
    Return the merge variant of ``value``.

    Only ``dict`` and its subclasses (``OrderedDict``, ``defaultdict``) count as
    mappings; other mapping classes and read-only views such as
    ``types.MappingProxyType`` are opaque scalars. Only ``list`` and ``tuple``
    count as sequences, so ``str`` and ``bytes`` stay scalars.
    """
    if isinstance(value, dict):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def is_object(value: Any) -> bool:
    return classify(value) is NodeKind.MAPPING


def is_array(value: Any) -> bool:
    return classify(value) is NodeKind.SEQUENCE
