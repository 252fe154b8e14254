"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
and plain-text output keep working when it is not installed.  Two
proxies are exported: :data:`console` writes diagnostics to stderr,
:data:`output` writes command results to stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from problem_solving.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed.",
            hint="Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


def rich_available() -> bool:
    """Return ``True`` when Rich can be imported."""
    try:
        _load_rich_console_class()
    except MissingDependencyError:
        return False
    return True


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain ``print``."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except MissingDependencyError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects)

    def print_text(self, text: str) -> None:
        """Print *text* verbatim; brackets and emoji codes are not interpreted."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except MissingDependencyError:
            print(text, file=sys.stderr if self._stderr else sys.stdout)
            return
        from rich.text import Text

        rich_console.print(Text(text))

    def print_labelled(self, label: str, style: str, text: str) -> None:
        """Print a *style*-d *label* followed by verbatim *text*."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except MissingDependencyError:
            print(label, text, file=sys.stderr if self._stderr else sys.stdout)
            return
        from rich.text import Text

        rich_console.print(Text.assemble((label, style), " ", text))


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
