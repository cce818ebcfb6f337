"""Profile business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fitness_tracker.domain.errors import ProfileNotFoundError, ValidationError
from fitness_tracker.domain.profile import Profile

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for the singleton profile."""

    def get_profile(self) -> Profile | None:
        """Return the profile row, if present."""

    def update_profile(self, profile: Profile) -> bool:
        """Overwrite the profile and return True when a row was updated."""


@dataclass
class ProfileService:
    """Service for reading and replacing the user profile."""

    repository: ProfileRepository
    range_check: bool = False

    def get_profile(self) -> Profile:
        """Return the singleton profile."""
        profile = self.repository.get_profile()
        if profile is None:
            raise ProfileNotFoundError("Profile has not been initialized")
        return profile

    def update_profile(
        self, name: str, weight: float, height: float, goal: str
    ) -> Profile:
        """Replace all profile fields."""
        profile = Profile(name=name, weight=weight, height=height, goal=goal)
        if self.range_check:
            _check_ranges(profile)
        if not self.repository.update_profile(profile):
            raise ProfileNotFoundError("Profile has not been initialized")
        logger.info("Profile updated", extra={"profile_name": name})
        return profile


def _check_ranges(profile: Profile) -> None:
    if profile.weight <= 0:
        raise ValidationError("weight must be positive")
    if profile.height <= 0:
        raise ValidationError("height must be positive")
