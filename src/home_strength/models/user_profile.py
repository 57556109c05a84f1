"""Household user profile models."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class ProfileType(str, Enum):
    """Household profile categories."""

    ADULT = "adult"  # At-home strength, beginner-friendly
    TEEN = "teen"  # Teen athlete (volleyball: jump & serve)
    CHILD_7 = "child7"
    CHILD_5 = "child5"
    GROUP_FITNESS = "group_fitness"  # Leads bodyweight classes

    @property
    def display_name(self) -> str:
        return _PROFILE_DETAILS[self][0]

    @property
    def subtitle(self) -> str:
        return _PROFILE_DETAILS[self][1]

    @property
    def stable_id(self) -> UUID:
        """Fixed id so progress stays attached to the same profile."""
        return UUID(int=list(ProfileType).index(self) + 1)

    @property
    def is_young_kid(self) -> bool:
        return self in (ProfileType.CHILD_7, ProfileType.CHILD_5)

    @property
    def is_adult_or_teen(self) -> bool:
        return not self.is_young_kid

    @property
    def is_group_fitness(self) -> bool:
        return self == ProfileType.GROUP_FITNESS


_PROFILE_DETAILS = {
    ProfileType.ADULT: ("Adult", "At-home strength · Beginner-friendly"),
    ProfileType.TEEN: ("Teen Athlete", "Volleyball · Jump & serve"),
    ProfileType.CHILD_7: ("7-Year-Old", "Fun movement & games"),
    ProfileType.CHILD_5: ("5-Year-Old", "Super fun moves & play"),
    ProfileType.GROUP_FITNESS: (
        "Group Fitness Instructor",
        "Lead bodyweight classes · No equipment",
    ),
}


@dataclass
class UserProfile:
    """A household member using the app."""

    profile_type: ProfileType
    custom_name: str | None = None  # e.g. the teen's first name

    @property
    def id(self) -> UUID:
        return self.profile_type.stable_id

    @property
    def display_name(self) -> str:
        return self.custom_name or self.profile_type.display_name

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "profile_type": self.profile_type.value,
            "custom_name": self.custom_name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from dictionary."""
        return cls(
            profile_type=ProfileType(data["profile_type"]),
            custom_name=data.get("custom_name"),
        )
