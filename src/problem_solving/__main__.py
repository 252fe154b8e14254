"""Allow ``python -m problem_solving`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m problem_solving`` behaves identically to the
``problem-solving`` console script.
"""

from __future__ import annotations

from problem_solving.cli.app import cli

if __name__ == "__main__":
    cli()
