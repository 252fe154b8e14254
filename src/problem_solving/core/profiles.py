"""Override-wins merge of partial updates into a :class:`Profile`.

The base profile is never mutated; every call returns a fresh
:class:`Profile`, including when the override set is empty.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from problem_solving.core.models import PROFILE_FIELDS, Profile, ProfileUpdate
from problem_solving.exceptions import InvalidFieldError, known_fields_hint


def update_profile(
    profile: Profile | Mapping[str, Any],
    overrides: ProfileUpdate | Mapping[str, Any],
) -> Profile:
    """Return a new profile with the fields present in *overrides* replaced.

    *profile* may be a :class:`Profile` or a mapping accepted by
    :meth:`Profile.from_mapping`.

    Raises
    ------
    InvalidFieldError
        If *overrides* names a field :class:`Profile` does not have.
    """
    base = profile if isinstance(profile, Profile) else Profile.from_mapping(profile)

    unknown = [key for key in overrides if key not in PROFILE_FIELDS]
    if unknown:
        raise InvalidFieldError(
            f"Cannot override unknown profile field(s): {', '.join(map(str, unknown))}",
            hint=known_fields_hint(PROFILE_FIELDS),
        )

    return replace(base, **overrides)
