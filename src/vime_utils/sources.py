"""Structured documents folded together with ``merge_obj_deep``."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Union

import yaml

try:  # pragma: no cover - Python < 3.11
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from .errors import UnsupportedFormatError
from .merger import merge_obj_deep

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

SUPPORTED_SUFFIXES = {".yml", ".yaml", ".json", ".toml"}


def read_document(path: PathLike) -> Any:
    """
    Parse a YAML, JSON or TOML file, picking the parser from its suffix.

    Empty YAML and JSON files read as ``{}``. Raises UnsupportedFormatError
    for any other suffix.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedFormatError(f"{path} is not a supported document")

    text = path.read_text(encoding="utf-8")
    if suffix in {".yml", ".yaml"}:
        data = yaml.safe_load(text)
        return {} if data is None else data
    if suffix == ".json":
        return json.loads(text or "{}")
    return tomllib.loads(text)


def load_merged(paths: Iterable[PathLike], *, optional: bool = False) -> Any:
    """
    Read ``paths`` in order and deep-merge each document over the previous ones.

    Later documents win on conflicting scalars, lists are concatenated and
    nested mappings are merged. A document whose top level is not a mapping
    replaces everything read before it.
    """
    merged: Any = {}
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            if optional:
                logger.debug("Skipping missing document %s", path)
                continue
            raise FileNotFoundError(path)
        document = read_document(path)
        logger.debug("Merging document %s", path)
        merged = merge_obj_deep(merged, document)
    return merged


__all__ = ["SUPPORTED_SUFFIXES", "load_merged", "read_document"]
