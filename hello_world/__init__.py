"""Static profiles and users for the hello-world demo.

The records themselves live in :mod:`hello_world.mock` and are checked when
that module is first imported, so the package only loads them on demand.
"""

from __future__ import annotations

from typing import Dict, List

from .integrity import FixtureIntegrityError, validate_fixture
from .models import Profile, ProfileType, User, UserStatus


def export() -> Dict[str, List[Dict[str, object]]]:
    """Return the mock users and profiles as plain dictionaries."""

    from .mock import export as _export

    return _export()


def render_fixture(fmt: str = "json") -> str:
    """Render the exported data as JSON or YAML text."""

    from .formatting import render_fixture as _render_fixture

    return _render_fixture(fmt)


__all__ = [
    "FixtureIntegrityError",
    "Profile",
    "ProfileType",
    "User",
    "UserStatus",
    "export",
    "render_fixture",
    "validate_fixture",
]
