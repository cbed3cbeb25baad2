"""Attribute definition with writable / enumerable / configurable metadata."""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar, Union

from .errors import PropertyDefinitionError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PROPS_ATTR = "__vime_props__"


@dataclass(frozen=True)
class PropDescriptor:
    value: Any = None
    writable: bool = False
    enumerable: bool = False
    configurable: bool = False


DescriptorLike = Union[PropDescriptor, Mapping[str, Any]]

_FIELD_NAMES = tuple(field.name for field in fields(PropDescriptor))


class _DefinedProperty:
    """Data descriptor reading its state from the holder class of the instance."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return _props_of(type(instance))[self.name].value

    def __set__(self, instance: Any, value: Any) -> None:
        props = _props_of(type(instance))
        descriptor = props[self.name]
        if not descriptor.writable:
            raise AttributeError(f"Cannot assign to read-only property '{self.name}'")
        props[self.name] = replace(descriptor, value=value)

    def __delete__(self, instance: Any) -> None:
        owner = type(instance)
        props = _props_of(owner)
        if not props[self.name].configurable:
            raise AttributeError(f"Cannot delete non-configurable property '{self.name}'")
        del props[self.name]
        delattr(owner, self.name)


def create_prop(obj: T, key: str, descriptor: DescriptorLike) -> T:
    """
    Define attribute ``key`` on ``obj`` according to ``descriptor``.

    ``descriptor`` is a :class:`PropDescriptor` or a mapping with any of the
    keys ``value``, ``writable``, ``enumerable`` and ``configurable``. A
    :class:`PropDescriptor` always specifies every field. With a mapping, keys
    left out keep their current setting when ``key`` already exists on ``obj``
    (plain instance attributes count as writable, enumerable and configurable),
    and default to ``None`` / ``False`` for a new property.

    Non-configurable properties only accept redefinitions that change nothing,
    or that make a writable property read-only or give it a new value.

    The first definition moves ``obj`` onto a private subclass of its class,
    so ``isinstance`` checks keep working while ``type(obj)`` changes.

    Returns ``obj``.
    """
    if not isinstance(key, str):
        raise PropertyDefinitionError(f"Property key must be a string, got {type(key).__name__}")
    options = _descriptor_options(descriptor)

    current = get_prop_descriptor(obj, key)
    if current is None:
        resolved = PropDescriptor(**options)
    else:
        resolved = replace(current, **options)
        _check_redefinition(key, current, resolved)

    _install(obj, key, resolved)
    return obj


def get_prop_descriptor(obj: Any, key: str) -> Optional[PropDescriptor]:
    """
    Return the descriptor of ``obj``'s own attribute ``key``.

    Plain instance attributes report as writable, enumerable and configurable.
    ``None`` means ``obj`` has no such own attribute.
    """
    descriptor = _props_of(type(obj)).get(key)
    if descriptor is not None:
        return descriptor
    instance_dict = getattr(obj, "__dict__", None)
    if instance_dict is not None and key in instance_dict:
        return PropDescriptor(instance_dict[key], writable=True, enumerable=True, configurable=True)
    return None


def own_keys(obj: Any) -> List[str]:
    """
    Enumerable own attribute names of ``obj``.

    Plain instance attributes come first in their assignment order, followed by
    enumerable defined properties in definition order. The two groups are not
    interleaved by creation time.
    """
    keys = [name for name in getattr(obj, "__dict__", {}) if isinstance(name, str)]
    keys.extend(name for name, descriptor in _props_of(type(obj)).items() if descriptor.enumerable)
    return keys


def _descriptor_options(descriptor: DescriptorLike) -> Dict[str, Any]:
    if isinstance(descriptor, PropDescriptor):
        return {name: getattr(descriptor, name) for name in _FIELD_NAMES}
    if not isinstance(descriptor, Mapping):
        raise PropertyDefinitionError(
            f"Property descriptor must be a mapping, got {type(descriptor).__name__}"
        )
    unknown = sorted(str(name) for name in descriptor if name not in _FIELD_NAMES)
    if unknown:
        raise PropertyDefinitionError(
            f"Unknown property descriptor option(s): {', '.join(unknown)}"
        )
    return dict(descriptor)


def _install(obj: Any, key: str, descriptor: PropDescriptor) -> None:
    owner = _own_class(obj)
    props = _props_of(owner)
    if key not in props:
        instance_dict = getattr(obj, "__dict__", None)
        if instance_dict is not None:
            instance_dict.pop(key, None)
        setattr(owner, key, _DefinedProperty(key))
    props[key] = descriptor


def _props_of(cls: type) -> Dict[str, PropDescriptor]:
    return cls.__dict__.get(_PROPS_ATTR, {})


def _own_class(obj: Any) -> type:
    cls = type(obj)
    if _PROPS_ATTR in cls.__dict__:
        return cls

    namespace = {
        _PROPS_ATTR: {},
        "__slots__": (),
        "__module__": cls.__module__,
        "__copy__": _holder_copy,
        "__deepcopy__": _holder_deepcopy,
    }
    try:
        holder = type(cls.__name__, (cls,), namespace)
        obj.__class__ = holder
    except TypeError as exc:
        raise PropertyDefinitionError(
            f"Cannot define properties on {cls.__name__} instances"
        ) from exc

    logger.debug("Attached property holder class to %s instance", cls.__name__)
    return holder


def _holder_copy(self: Any) -> Any:
    return _duplicate(self, copy.copy, lambda value: value)


def _holder_deepcopy(self: Any, memo: Dict[int, Any]) -> Any:
    return _duplicate(
        self,
        lambda obj: copy.deepcopy(obj, memo),
        lambda value: copy.deepcopy(value, memo),
    )


def _duplicate(obj: Any, copier: Callable[[Any], Any], copy_value: Callable[[Any], Any]) -> Any:
    # Copy as the plain base class, then give the duplicate its own holder.
    holder = type(obj)
    obj.__class__ = holder.__bases__[0]
    try:
        duplicate = copier(obj)
    finally:
        obj.__class__ = holder

    for name, descriptor in _props_of(holder).items():
        _install(duplicate, name, replace(descriptor, value=copy_value(descriptor.value)))
    return duplicate


def _check_redefinition(key: str, current: PropDescriptor, new: PropDescriptor) -> None:
    if current.configurable:
        return
    if new.configurable or new.enumerable != current.enumerable:
        raise PropertyDefinitionError(f"Cannot redefine property '{key}'")
    if current.writable:
        return
    if new.writable or not _same_value(current.value, new.value):
        raise PropertyDefinitionError(f"Cannot redefine property '{key}'")


def _same_value(left: Any, right: Any) -> bool:
    if left is right:
        return True
    return type(left) is type(right) and left == right
