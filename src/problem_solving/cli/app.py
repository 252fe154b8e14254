"""CLI application entry point and command routing for problem-solving.

This module is the **sole error boundary** for the entire application.
It catches :class:`~problem_solving.exceptions.ProblemSolvingError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core layer.
* Command results go to stdout via :data:`output`; notices and errors go
  to stderr via :data:`console`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from problem_solving.cli import exit_codes
from problem_solving.cli.console import console, output, rich_available
from problem_solving.core.models import PROFILE_FIELDS, Profile
from problem_solving.exceptions import InvalidArgumentError, ProblemSolvingError
from problem_solving.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _profile_arguments() -> argparse.ArgumentParser:
    """Parent parser carrying the three base-profile flags."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("--name", required=True, help="Profile name.")
    parent.add_argument("--age", required=True, type=int, help="Profile age.")
    parent.add_argument("--email", required=True, help="Profile email.")
    return parent


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``problem-solving area``     — area of a circle or rectangle
    * ``problem-solving profile``  — merge overrides into a profile
    * ``problem-solving get``      — read one profile field
    * ``problem-solving --version``
    """
    parser = argparse.ArgumentParser(
        prog="problem-solving",
        description="Shape areas, field lookup, and profile merging.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command")

    area = commands.add_parser("area", help="Compute the area of a shape.")
    area.add_argument("--radius", type=number, default=None)
    area.add_argument("--width", type=number, default=None)
    area.add_argument("--height", type=number, default=None)

    profile_flags = _profile_arguments()

    profile = commands.add_parser(
        "profile",
        parents=[profile_flags],
        help="Apply overrides to a profile and show the result.",
    )
    profile.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Override one field; may be repeated.",
    )

    get = commands.add_parser(
        "get",
        parents=[profile_flags],
        help="Print a single field of a profile.",
    )
    get.add_argument("field", help=f"One of: {', '.join(PROFILE_FIELDS)}.")

    return parser


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------

def number(text: str) -> int | float:
    """Parse a dimension flag, keeping whole numbers as ``int``."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def _base_profile(args: argparse.Namespace) -> Profile:
    return Profile(name=args.name, age=args.age, email=args.email)


def _parse_overrides(items: Sequence[str]) -> dict[str, Any]:
    """Turn repeated ``FIELD=VALUE`` flags into an override mapping.

    Later occurrences of the same field win.  ``age`` values are
    converted to ``int``; unknown field names are left for
    :func:`~problem_solving.core.profiles.update_profile` to reject.
    """
    overrides: dict[str, Any] = {}
    for item in items:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise InvalidArgumentError(
                f"Malformed override: {item!r}",
                hint="Use --set FIELD=VALUE, e.g. --set age=26",
            )
        if key == "age":
            try:
                overrides[key] = int(value)
            except ValueError as exc:
                raise InvalidArgumentError(
                    f"Age must be an integer, got {value!r}",
                ) from exc
        else:
            overrides[key] = value
    return overrides


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render_profile(profile: Profile) -> None:
    """Print *profile* as a two-column table."""
    rows = [(name, str(value)) for name, value in profile.to_dict().items()]

    if not rich_available():
        for name, value in rows:
            output.print_text(f"{name:<8} {value}")
        return

    from rich.table import Table
    from rich.text import Text

    table = Table(
        title="Profile",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for name, value in rows:
        table.add_row(name, Text(value))
    output.print(table)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_area(args: argparse.Namespace) -> int:
    """Compute the area from whichever dimension flags were given."""
    from problem_solving.core.shapes import calculate_shape_area

    dimensions = {
        name: getattr(args, name)
        for name in ("radius", "width", "height")
        if getattr(args, name) is not None
    }
    area = calculate_shape_area(dimensions)
    if area is None:
        console.print(
            "[yellow]No matching shape.[/yellow] "
            "Give --radius, or both --width and --height."
        )
        return exit_codes.SUCCESS

    output.print_text(str(area))
    return exit_codes.SUCCESS


def _handle_profile(args: argparse.Namespace) -> int:
    """Merge ``--set`` overrides into the base profile and render it."""
    from problem_solving.core.profiles import update_profile

    updated = update_profile(_base_profile(args), _parse_overrides(args.overrides))
    _render_profile(updated)
    return exit_codes.SUCCESS


def _handle_get(args: argparse.Namespace) -> int:
    """Print one field of the base profile."""
    from problem_solving.core.records import get_property

    value = get_property(_base_profile(args).to_dict(), args.field)
    output.print_text(str(value))
    return exit_codes.SUCCESS


_HANDLERS = {
    "area": _handle_area,
    "profile": _handle_profile,
    "get": _handle_get,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the problem-solving CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: run :func:`main` and exit with its code.

    Domain errors print their message and hint and exit with
    :data:`~problem_solving.cli.exit_codes.GENERAL_ERROR`; Ctrl+C and
    unforeseen exceptions get their own exit codes.  Exception text is
    printed verbatim, never parsed as Rich markup.
    """
    try:
        code = main()
        sys.exit(code)
    except ProblemSolvingError as exc:
        console.print_labelled("Error:", "bold red", str(exc))
        if exc.hint:
            console.print_labelled("Hint:", "yellow", exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_labelled(
            "Unexpected error.",
            "bold red",
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
