"""Process exit codes returned by ``problem-solving``.

``main`` returns one of these and ``cli`` passes it to ``sys.exit``;
tests compare against the names, never the raw numbers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command ran; this includes ``area`` input that matches no shape."""

GENERAL_ERROR: int = 1
"""A ProblemSolvingError (bad field name, malformed ``--set``) was reported."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached ``cli``."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
