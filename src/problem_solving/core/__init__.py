"""Core layer — pure data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from problem_solving.core.models import (
    PROFILE_FIELDS,
    Circle,
    Profile,
    ProfileUpdate,
    Rectangle,
    Shape,
    ShapeKind,
)
from problem_solving.core.profiles import update_profile
from problem_solving.core.records import get_property, property_getter
from problem_solving.core.shapes import as_shape, calculate_shape_area, classify_shape

__all__: list[str] = [
    "PROFILE_FIELDS",
    "Circle",
    "Profile",
    "ProfileUpdate",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "as_shape",
    "calculate_shape_area",
    "classify_shape",
    "get_property",
    "property_getter",
    "update_profile",
]
