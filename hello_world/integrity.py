"""Invariant checks for the mock profiles and users."""
from __future__ import annotations

from typing import Iterable, Set

from .models import Profile, User


class FixtureIntegrityError(ValueError):
    """Raised when the mock records break one of their invariants."""


def _check_ids(kind: str, ids: Iterable[object]) -> Set[int]:
    seen: Set[int] = set()
    for record_id in ids:
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            raise FixtureIntegrityError(f"{kind} id must be an integer, got {record_id!r}")
        if record_id <= 0:
            raise FixtureIntegrityError(f"{kind} id must be a positive integer, got {record_id}")
        if record_id in seen:
            raise FixtureIntegrityError(f"Duplicate {kind} id {record_id}")
        seen.add(record_id)
    return seen


def validate_fixture(profiles: Iterable[Profile], users: Iterable[User]) -> None:
    """Ensure ids are unique and every user points at a known profile."""

    users = list(users)
    profile_ids = _check_ids("profile", (profile.id for profile in profiles))
    _check_ids("user", (user.id for user in users))

    for user in users:
        if user.age < 0:
            raise FixtureIntegrityError(f"User {user.id} has a negative age ({user.age})")
        if user.profile_id not in profile_ids:
            raise FixtureIntegrityError(
                f"User {user.id} references unknown profile {user.profile_id}"
            )


__all__ = ["FixtureIntegrityError", "validate_fixture"]
