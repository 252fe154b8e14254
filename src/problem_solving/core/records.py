"""Type-preserving field lookup on records."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar, overload

from problem_solving.exceptions import InvalidFieldError, known_fields_hint
from problem_solving.utils.fields import has_field, read_field

K = TypeVar("K")
V = TypeVar("V")


@overload
def get_property(record: Mapping[K, V], field_name: K) -> V: ...


@overload
def get_property(record: object, field_name: str) -> Any: ...


def get_property(record: Any, field_name: Any) -> Any:
    """Return the value stored under *field_name* in *record*.

    Mappings are looked up by key, other objects by attribute.  The
    value is returned as-is; no conversion takes place.

    Raises
    ------
    InvalidFieldError
        If *field_name* is not a field of *record*.
    """
    if not has_field(record, field_name):
        raise InvalidFieldError(
            f"{type(record).__name__} has no field {field_name!r}",
            hint=_field_hint(record),
        )
    return read_field(record, field_name)


def property_getter(field_name: Any) -> Callable[[Any], Any]:
    """Return a one-argument accessor equivalent to ``get_property(_, field_name)``."""

    def _get(record: Any) -> Any:
        return get_property(record, field_name)

    return _get


def _field_hint(record: object) -> str | None:
    """List the record's fields when they can be enumerated."""
    if isinstance(record, Mapping):
        return known_fields_hint(map(str, record))
    if is_dataclass(record):
        return known_fields_hint(f.name for f in fields(record))
    return None
