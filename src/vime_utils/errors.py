"""Exception types for the vime-utils API."""
from __future__ import annotations

from .exceptions import VimeUtilsError


class PropertyDefinitionError(VimeUtilsError, TypeError):
    """Raised when a property cannot be defined or redefined on an object."""


class UnsupportedFormatError(VimeUtilsError):
    """Raised when a document format is not supported."""


__all__ = [
    "VimeUtilsError",
    "PropertyDefinitionError",
    "UnsupportedFormatError",
]
