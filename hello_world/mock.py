"""Static in-memory profiles and users shared by the demo."""
from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .integrity import FixtureIntegrityError, validate_fixture
from .models import Profile, ProfileType, User, UserStatus

logger = logging.getLogger("hello_world.mock")


PROFILES: Tuple[Profile, ...] = (
    Profile(id=1, type=ProfileType.COMMON),
    Profile(id=2, type=ProfileType.ADMINISTRATOR),
)

USERS: Tuple[User, ...] = (
    User(
        id=1,
        name="Mota",
        email="mota@guilherr.me",
        age=20,
        profile_id=1,
        status=UserStatus.ACTIVE,
    ),
    User(
        id=2,
        name="Guilherme",
        email="guilhermebromonschenkel@gmail.com",
        age=22,
        profile_id=2,
        status=UserStatus.INACTIVE,
    ),
    User(
        id=3,
        name="Daniella",
        email="dani@gmail.com",
        age=19,
        profile_id=1,
        status=UserStatus.BLOCKED,
    ),
)


def export() -> Dict[str, List[Dict[str, object]]]:
    """Return the users and profiles as plain dictionaries.

    A new structure is built on every call so callers may modify the result
    freely without affecting later reads.
    """

    return {
        "users": [user.to_dict() for user in USERS],
        "profiles": [profile.to_dict() for profile in PROFILES],
    }


validate_fixture(PROFILES, USERS)
logger.debug("Loaded %d profiles and %d users", len(PROFILES), len(USERS))


__all__ = ["FixtureIntegrityError", "PROFILES", "USERS", "export", "validate_fixture"]
