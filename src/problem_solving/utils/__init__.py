"""Shared utilities — field-access helpers used across the core layer.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from problem_solving.utils.fields import has_field, read_field

__all__: list[str] = ["has_field", "read_field"]
