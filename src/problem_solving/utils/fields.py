"""Uniform field access over mappings, dataclasses and plain objects.

A "field" of a mapping is one of its keys; a field of a dataclass
instance is one of its declared fields; a field of any other object is
one of its attributes.  Both helpers apply the same rule so callers can
treat ``{"radius": 2}`` and ``Circle(radius=2)`` alike.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any


def has_field(value: object, name: object) -> bool:
    """Return ``True`` when *value* carries a field called *name*."""
    if isinstance(value, Mapping):
        try:
            return name in value
        except TypeError:
            # unhashable name
            return False
    if not isinstance(name, str):
        return False
    if is_dataclass(value) and not isinstance(value, type):
        return any(f.name == name for f in fields(value))
    return hasattr(value, name)


def read_field(value: object, name: Any) -> Any:
    """Return the field *name* of *value*.

    Callers are expected to check :func:`has_field` first; a missing
    field surfaces as the underlying ``KeyError`` / ``AttributeError``.
    """
    if isinstance(value, Mapping):
        return value[name]
    return getattr(value, name)
