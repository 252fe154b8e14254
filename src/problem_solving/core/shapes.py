"""Pure shape classification and area calculation.

A value's variant is decided by the fields it carries, in this order:

1. **Circle** — it has a ``radius``.
2. **Rectangle** — it has both ``width`` and ``height``.
3. Anything else matches no variant.

The rule applies equally to the tagged dataclasses in
:mod:`problem_solving.core.models`, to plain mappings, and to arbitrary
objects.  Unmatched values yield ``None``; nothing here raises.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from problem_solving.core.models import Circle, Rectangle, Shape, ShapeKind
from problem_solving.utils.fields import has_field, read_field

AREA_QUANTUM: Decimal = Decimal("0.01")
"""Circle areas are rounded to this step."""

UNROUNDED_FROM: float = 1e21
"""Areas this large already print without a fractional part."""


def _round_area(area: float) -> float:
    """Round *area* to :data:`AREA_QUANTUM`, ties away from zero.

    The exact binary value of *area* is rounded, so a float that is
    precisely halfway (e.g. ``10.125``) goes up rather than to even.
    Non-finite values, and magnitudes of at least :data:`UNROUNDED_FROM`,
    are returned unchanged.
    """
    if not math.isfinite(area) or abs(area) >= UNROUNDED_FROM:
        return area
    return float(Decimal(area).quantize(AREA_QUANTUM, rounding=ROUND_HALF_UP))


def classify_shape(value: object) -> ShapeKind | None:
    """Return the variant *value* belongs to, or ``None`` if it matches none."""
    if has_field(value, "radius"):
        return ShapeKind.CIRCLE
    if has_field(value, "width") and has_field(value, "height"):
        return ShapeKind.RECTANGLE
    return None


def as_shape(value: object) -> Shape | None:
    """Convert a structural shape-like value into its tagged dataclass."""
    kind = classify_shape(value)
    if kind is ShapeKind.CIRCLE:
        return Circle(radius=read_field(value, "radius"))
    if kind is ShapeKind.RECTANGLE:
        return Rectangle(
            width=read_field(value, "width"),
            height=read_field(value, "height"),
        )
    return None


def calculate_shape_area(shape: Shape | object) -> float | None:
    """Compute the area of *shape*.

    Circle areas are rounded to two decimal places, halves upward; rectangle
    areas are returned exactly as ``width * height``.  A value matching
    neither variant returns ``None``.
    """
    kind = classify_shape(shape)
    if kind is ShapeKind.CIRCLE:
        radius = read_field(shape, "radius")
        return _round_area(math.pi * radius * radius)
    if kind is ShapeKind.RECTANGLE:
        return read_field(shape, "width") * read_field(shape, "height")
    return None
