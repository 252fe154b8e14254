"""Shared pytest fixtures and configuration for the problem-solving test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests call ``main`` with an explicit argv and capture output.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

from problem_solving.core.models import Profile


@pytest.fixture
def bob() -> Profile:
    return Profile(name="Bob", age=25, email="b@x.com")
