"""
vime-utils public API.
"""
from __future__ import annotations

import logging

from .errors import PropertyDefinitionError, UnsupportedFormatError, VimeUtilsError
from .merger import merge_obj_deep, merge_obj_deep_all
from .props import PropDescriptor, create_prop, get_prop_descriptor, own_keys
from .sources import load_merged, read_document
from .unit import NodeKind, classify, is_array, is_object

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NodeKind",
    "PropDescriptor",
    "PropertyDefinitionError",
    "UnsupportedFormatError",
    "VimeUtilsError",
    "classify",
    "create_prop",
    "get_prop_descriptor",
    "is_array",
    "is_object",
    "load_merged",
    "merge_obj_deep",
    "merge_obj_deep_all",
    "own_keys",
    "read_document",
]
