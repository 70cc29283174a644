"""Profile module for participant profiles."""

from circlematch.profile.models import InvalidProfileError, Profile, coerce_profile

__all__ = [
    "InvalidProfileError",
    "Profile",
    "coerce_profile",
]
