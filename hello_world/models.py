"""Record types for the hello-world mock data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class ProfileType(str, Enum):
    """Role a profile grants to the users attached to it."""

    COMMON = "common"
    ADMINISTRATOR = "administrator"


class UserStatus(str, Enum):
    """Lifecycle state of a user account."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BLOCKED = "BLOCKED"


@dataclass(frozen=True)
class Profile:
    """Represents a profile that users reference through ``profile_id``."""

    id: int
    type: ProfileType

    def to_dict(self) -> Dict[str, Union[int, str]]:
        return {"id": self.id, "type": self.type.value}


@dataclass(frozen=True)
class User:
    """Represents a user account in the mock data."""

    id: int
    name: str
    email: str
    age: int
    profile_id: int
    status: UserStatus

    def to_dict(self) -> Dict[str, Union[int, str]]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "profile_id": self.profile_id,
            "status": self.status.value,
        }


__all__ = ["Profile", "ProfileType", "User", "UserStatus"]
