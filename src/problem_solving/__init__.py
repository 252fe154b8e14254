"""problem-solving — small, pure data utilities.

Shape areas over a tagged union, type-preserving field lookup, and
override-wins profile merging.
"""

from problem_solving.core import (
    Circle,
    Profile,
    ProfileUpdate,
    Rectangle,
    Shape,
    ShapeKind,
    calculate_shape_area,
    get_property,
    update_profile,
)
from problem_solving.version import __version__

__all__: list[str] = [
    "Circle",
    "Profile",
    "ProfileUpdate",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "__version__",
    "calculate_shape_area",
    "get_property",
    "update_profile",
]
