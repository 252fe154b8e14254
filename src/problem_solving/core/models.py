"""Domain models for problem-solving.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and conversion.  They carry zero I/O and
must remain pure across the entire lifecycle.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any, TypedDict

from problem_solving.exceptions import InvalidFieldError, known_fields_hint


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

class ShapeKind(enum.Enum):
    """Tag identifying which :data:`Shape` variant a value is."""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"


@dataclass(frozen=True, slots=True)
class Circle:
    """A circle described by its radius."""

    radius: float
    """Radius, in caller-chosen units."""

    kind: ShapeKind = field(default=ShapeKind.CIRCLE, init=False)
    """Always :attr:`ShapeKind.CIRCLE`."""


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned rectangle described by its two side lengths."""

    width: float
    height: float

    kind: ShapeKind = field(default=ShapeKind.RECTANGLE, init=False)
    """Always :attr:`ShapeKind.RECTANGLE`."""


Shape = Circle | Rectangle
"""Closed variant consumed by the area calculator."""


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

PROFILE_FIELDS: tuple[str, ...] = ("name", "age", "email")
"""Field names of :class:`Profile`, in declaration order."""


@dataclass(frozen=True, slots=True)
class Profile:
    """A user profile record."""

    name: str
    age: int
    email: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Profile:
        """Build a profile from a mapping holding exactly the three fields.

        Raises
        ------
        InvalidFieldError
            If *data* has an unknown key or lacks one of the fields.
        """
        unknown = [key for key in data if key not in PROFILE_FIELDS]
        if unknown:
            raise InvalidFieldError(
                f"Unknown profile field(s): {', '.join(map(str, unknown))}",
                hint=known_fields_hint(PROFILE_FIELDS),
            )
        missing = [name for name in PROFILE_FIELDS if name not in data]
        if missing:
            raise InvalidFieldError(
                f"Missing profile field(s): {', '.join(missing)}",
            )
        return cls(name=data["name"], age=data["age"], email=data["email"])

    def to_dict(self) -> dict[str, Any]:
        """Return the profile as a plain ``dict``."""
        return asdict(self)


class ProfileUpdate(TypedDict, total=False):
    """Sparse set of profile overrides; every key is optional."""

    name: str
    age: int
    email: str
