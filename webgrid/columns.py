"""
Column path resolution.

Turns a dotted column path such as ``"Address.City"`` into a value accessor
for a given element shape. Two shapes are supported:

- *Static* types (dataclasses, ``NamedTuple``, annotated classes, classes with
  properties, plain classes whose attributes live on the instance). Each path
  segment is looked up on the current type and the working type is narrowed to
  that member's declared type.
- *Dynamic* property bags (mappings, ``SimpleNamespace``, subclasses of
  :class:`DynamicFieldAccess`). Members are only known at runtime, so the accessor is
  bound to the first path segment and dotted paths are not traversed.

Resolution failure is reported as ``None``, never raised.
"""

import inspect
import typing
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from types import SimpleNamespace
from typing import Any, Callable, Optional

_MISSING = object()


class DynamicFieldAccess(ABC):
    """A property bag whose members can only be looked up at runtime.

    Opt in by subclassing or with ``DynamicFieldAccess.register(cls)``; a
    record type that merely happens to define ``get`` stays static.
    """

    @abstractmethod
    def get(self, name: str) -> Any:
        ...


@dataclass(frozen=True)
class ColumnAccessor:
    """A resolved column: reads the column's value from one element."""

    column: str
    value_type: Any
    getter: Callable[[Any], Any]

    def __call__(self, element: Any) -> Any:
        return self.getter(element)


def is_dynamic_shape(element_type: Any) -> bool:
    """True when members of ``element_type`` can only be bound at runtime."""
    if not isinstance(element_type, type):
        return False
    if issubclass(element_type, (Mapping, SimpleNamespace)):
        return True
    return issubclass(element_type, DynamicFieldAccess)


def get_field(value: Any, name: str, default: Any = None) -> Any:
    """Read a single member of ``value`` by name, dynamic or static."""
    if isinstance(value, Mapping):
        return value.get(name, default)
    if isinstance(value, DynamicFieldAccess):
        result = value.get(name)
        return default if result is None else result
    return getattr(value, name, default)


def resolve_column(
    element_type: Any, column: str, sample: Any = None
) -> Optional[ColumnAccessor]:
    """Resolve ``column`` against ``element_type``.

    Args:
        element_type: The runtime type of the records being sorted.
        column: Dotted member path, e.g. ``"Address.City"``.
        sample: Optional representative element. Used to find members that
            are only set on instances, and to detect members missing from a
            dynamic bag. Only this one element is inspected, so the result
            depends on which record comes first: a mapping sample lacking the
            member fails resolution even if later records have it, and an
            instance attribute that is None on the sample stays untyped.

    Returns:
        A ColumnAccessor, or None if the path does not resolve.
    """
    if not column:
        return None
    if element_type is None and sample is not None:
        element_type = type(sample)
    if is_dynamic_shape(element_type):
        return _resolve_dynamic(column, sample)
    return _resolve_static(element_type, column, sample)


def declared_members(element_type: Any) -> list[str]:
    """Public member names declared by a static type, in declaration order."""
    if not isinstance(element_type, type) or is_dynamic_shape(element_type):
        return []
    return list(_static_members(element_type))


# ---- Dynamic shapes ----

def _resolve_dynamic(column: str, sample: Any) -> Optional[ColumnAccessor]:
    # Only the top-level member is bound; "a.b" reads member "a".
    name = column.split(".", 1)[0]
    if sample is not None and not _has_dynamic_member(sample, name):
        return None

    def getter(element):
        return get_field(element, name)

    return ColumnAccessor(column=column, value_type=Any, getter=getter)


def _has_dynamic_member(sample: Any, name: str) -> bool:
    if isinstance(sample, Mapping):
        return name in sample
    if isinstance(sample, SimpleNamespace):
        return name in vars(sample)
    # Arbitrary bags cannot be enumerated; assume the member exists.
    return True


# ---- Static shapes ----

def _resolve_static(element_type: Any, column: str, sample: Any) -> Optional[ColumnAccessor]:
    names = column.split(".")
    owner = element_type
    current = sample
    for name in names:
        member_type = _member_type(owner, name, current)
        if member_type is _MISSING:
            return None
        current = getattr(current, name, None) if current is not None else None
        if (member_type is Any or not isinstance(member_type, type)) and current is not None:
            member_type = type(current)
        owner = member_type

    return ColumnAccessor(column=column, value_type=owner, getter=_chain_getter(names))


def _chain_getter(names: list[str]) -> Callable[[Any], Any]:
    def getter(element):
        value = element
        for name in names:
            if value is None:
                return None
            value = getattr(value, name, None)
        return value

    return getter


def _member_type(owner: Any, name: str, sample: Any) -> Any:
    """Declared type of member ``name``, or _MISSING if there is no such member."""
    if name.startswith("_"):
        return _MISSING
    if owner is not Any and isinstance(owner, type) and not is_dynamic_shape(owner):
        members = _static_members(owner)
        if name in members:
            return _unwrap_optional(members[name])
    if sample is not None and name in getattr(sample, "__dict__", ()):
        value = vars(sample)[name]
        return Any if value is None else type(value)
    return _MISSING


def _static_members(cls: type) -> dict[str, Any]:
    """Map public member name to declared type for a static class."""
    members: dict[str, Any] = {}

    for name, hint in _class_hints(cls).items():
        if typing.get_origin(hint) is typing.ClassVar or hint is typing.ClassVar:
            continue
        members[name] = hint

    # collections.namedtuple without annotations
    for name in getattr(cls, "_fields", ()) or ():
        members.setdefault(name, Any)

    for klass in cls.__mro__:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            members.setdefault(name, Any)

    for klass in cls.__mro__:
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and attr.fget is not None:
                members.setdefault(name, _return_type(attr.fget))
            elif isinstance(attr, cached_property):
                members.setdefault(name, _return_type(attr.func))

    return {name: tp for name, tp in members.items() if not name.startswith("_")}


def _class_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError, AttributeError):
        pass

    # Unresolvable forward references: keep names, drop the types.
    hints: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        try:
            annotations = inspect.get_annotations(klass)
        except (NameError, TypeError, AttributeError):
            continue
        for name, hint in annotations.items():
            hints[name] = Any if isinstance(hint, str) else hint
    return hints


def _return_type(func: Callable) -> Any:
    try:
        return typing.get_type_hints(func).get("return", Any)
    except (NameError, TypeError, AttributeError):
        return Any


def _unwrap_optional(hint: Any) -> Any:
    """Optional[X] -> X; other unions and non-types become Any."""
    if isinstance(hint, type) or hint is Any:
        return hint
    args = typing.get_args(hint)
    if args and type(None) in args:
        remaining = [arg for arg in args if arg is not type(None)]
        if len(remaining) == 1:
            return _unwrap_optional(remaining[0])
    origin = typing.get_origin(hint)
    if isinstance(origin, type):
        return origin
    return Any
