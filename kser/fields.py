"""Named fields on plain objects, looked up, read, written and visited by name."""

from __future__ import annotations

import numbers
import typing
from typing import Any, Callable, Dict, Generic, Iterator, Mapping, Optional, TypeVar

T = TypeVar("T")

__all__ = [
    "FieldNotFound",
    "TypeMismatch",
    "Field",
    "NamedField",
    "is_field",
    "named_fields",
    "try_get_field_with_name",
    "get_field_with_name",
    "has_field",
    "try_get_value",
    "get_value",
    "get_value_strict",
    "get_field_map",
    "get_value_map",
    "set_values",
    "set_value",
    "visit_fields",
    "visit_name_values",
    "visit_values",
]


class FieldNotFound(LookupError):
    """No named field with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Field not found: {name}")
        self.name = name


class TypeMismatch(TypeError):
    """A field exists but its value does not fit the requested type."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Field type mismatch: {name}")
        self.name = name


class Field(Generic[T]):
    """A value together with the type it is declared to hold."""

    __slots__ = ("value", "value_type")

    def __init__(self, value: T, value_type: Optional[type] = None) -> None:
        self.value = value
        self.value_type = type(value) if value_type is None else value_type

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value and self.value_type is other.value_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, {self.value_type.__name__})"


class NamedField(Field[T]):
    """A field that can be reached by its name."""

    __slots__ = ("_name",)

    def __init__(self, name: str, value: T, value_type: Optional[type] = None) -> None:
        super().__init__(value, value_type)
        self._name = name

    def field_name(self) -> str:
        return self._name

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is NotImplemented:
            return result
        return result and self._name == other._name

    def __repr__(self) -> str:
        return (
            f"NamedField({self._name!r}, {self.value!r}, {self.value_type.__name__})"
        )


class _Incompatible(Exception):
    """Raised internally when a value cannot be assigned to a type."""


_MISSING = object()


def _accepts_anything(type_: Any) -> bool:
    return type_ is None or type_ is object or type_ is typing.Any


def _convert(value: Any, type_: Any) -> Any:
    """Return ``value`` as something assignable to ``type_``."""
    if _accepts_anything(type_) or isinstance(value, type_):
        return value
    if (
        isinstance(type_, type)
        and issubclass(type_, numbers.Number)
        and isinstance(value, numbers.Number)
    ):
        try:
            return type_(value)
        except (TypeError, ValueError):
            pass
    raise _Incompatible


def _members(obj: Any) -> Iterator[Any]:
    seen = set()
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in seen or slot in ("__dict__", "__weakref__"):
                continue
            seen.add(slot)
            member = getattr(obj, slot, _MISSING)
            if member is not _MISSING:
                yield member
    if hasattr(obj, "__dict__"):
        yield from vars(obj).values()


def is_field(obj: Any) -> bool:
    """Tell whether ``obj`` is a field instance or a field class."""
    if isinstance(obj, type):
        return issubclass(obj, Field)
    return isinstance(obj, Field)


def named_fields(obj: Any) -> Iterator[NamedField]:
    """Yield the named fields of ``obj`` in declaration order."""
    for member in _members(obj):
        if isinstance(member, NamedField):
            yield member


def _matches_type(field: Field, type_: Any) -> bool:
    if _accepts_anything(type_):
        return True
    return isinstance(field.value_type, type) and issubclass(field.value_type, type_)


def try_get_field_with_name(
    obj: Any, name: str, type_: Any = None
) -> Optional[NamedField]:
    """Return the field called ``name`` holding ``type_``, or None."""
    return next(
        (
            field
            for field in named_fields(obj)
            if _matches_type(field, type_) and field.field_name() == name
        ),
        None,
    )


def get_field_with_name(obj: Any, name: str, type_: Any = None) -> NamedField:
    """Return the field called ``name`` holding ``type_``; raise FieldNotFound."""
    field = try_get_field_with_name(obj, name, type_)
    if field is None:
        raise FieldNotFound(name)
    return field


def has_field(obj: Any, name: str) -> bool:
    """Tell whether ``obj`` has a named field called ``name``."""
    return any(field.field_name() == name for field in named_fields(obj))


def try_get_value(obj: Any, name: str, type_: Any = None) -> Any:
    """Return the value of field ``name`` as ``type_``, or None if unavailable."""
    for field in named_fields(obj):
        if field.field_name() != name:
            continue
        try:
            return _convert(field.value, type_)
        except _Incompatible:
            continue
    return None


def get_value(obj: Any, name: str, type_: Any = None, strict: bool = False) -> Any:
    """Return the value of field ``name`` as ``type_``.

    In strict mode the field must be declared with exactly ``type_``.
    Raises FieldNotFound or TypeMismatch.
    """
    for field in named_fields(obj):
        if field.field_name() != name:
            continue
        if strict:
            if field.value_type is type_:
                return field.value
            raise TypeMismatch(name)
        try:
            return _convert(field.value, type_)
        except _Incompatible:
            raise TypeMismatch(name) from None
    raise FieldNotFound(name)


def get_value_strict(obj: Any, name: str, type_: Any) -> Any:
    """Return the value of field ``name``, which must be declared as ``type_``."""
    return get_value(obj, name, type_, strict=True)


def get_field_map(obj: Any) -> Dict[str, NamedField]:
    """Map each field name to its field."""
    return {field.field_name(): field for field in named_fields(obj)}


def get_value_map(obj: Any) -> Dict[str, Any]:
    """Map each field name to its value."""
    return {field.field_name(): field.value for field in named_fields(obj)}


def set_values(
    obj: Any,
    values: Mapping[str, Any],
    caster: Optional[Callable[[Any, Any], Any]] = None,
) -> int:
    """Assign each field whose name is in ``values``; return how many were set.

    ``caster(value_type, value)`` turns a mapping value into the field's type.
    By default values must already fit the field's type, numbers being converted.
    """
    count = 0
    for field in named_fields(obj):
        name = field.field_name()
        if name not in values:
            continue
        raw = values[name]
        if caster is None:
            try:
                field.value = _convert(raw, field.value_type)
            except _Incompatible:
                raise TypeMismatch(name) from None
        else:
            field.value = caster(field.value_type, raw)
        count += 1
    return count


def set_value(obj: Any, name: str, value: Any) -> bool:
    """Assign ``value`` to field ``name``; return whether such a field exists."""
    for field in named_fields(obj):
        if field.field_name() == name:
            try:
                field.value = _convert(value, field.value_type)
            except _Incompatible:
                raise TypeMismatch(name) from None
            return True
    return False


def visit_fields(obj: Any, visitor: Callable[[NamedField], Any]) -> None:
    """Call ``visitor`` on each field; stop once it returns True."""
    for field in named_fields(obj):
        if visitor(field) is True:
            return


def visit_name_values(obj: Any, visitor: Callable[[str, Any], Any]) -> None:
    """Call ``visitor(name, value)`` on each field; stop on a truthy result."""
    for field in named_fields(obj):
        if visitor(field.field_name(), field.value):
            return


def visit_values(obj: Any, visitor: Callable[[Any], Any]) -> None:
    """Call ``visitor`` on each field value; stop once it returns True."""
    for field in named_fields(obj):
        if visitor(field.value) is True:
            return