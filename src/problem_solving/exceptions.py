"""Custom exception hierarchy for problem-solving.

All exceptions that cross layer boundaries must inherit from
:class:`ProblemSolvingError`.  The core functions are total over their
constrained input domains; these exceptions report the constraint
violations Python cannot rule out statically (an unknown field name, a
malformed command-line value, a missing optional dependency).

Hierarchy
---------
ProblemSolvingError
├── InvalidFieldError
├── InvalidArgumentError
└── MissingDependencyError
"""

from __future__ import annotations

from collections.abc import Iterable


class ProblemSolvingError(Exception):
    """Base exception for all problem-solving errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Record fields ---------------------------------------------------------

class InvalidFieldError(ProblemSolvingError):
    """Raised when a field name is not one of the record's fields."""


# --- Command-line input ----------------------------------------------------

class InvalidArgumentError(ProblemSolvingError):
    """Raised when a command-line value cannot be interpreted."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(ProblemSolvingError):
    """Raised when an optional runtime dependency is not available."""


def known_fields_hint(fields: Iterable[str]) -> str:
    """Build the hint listing the valid field names, in the given order."""
    return "Known fields: " + ", ".join(fields)
