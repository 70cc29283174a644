"""Pydantic models for participant profiles."""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class InvalidProfileError(ValueError):
    """Raised when profile data is missing or has malformed label sets."""

    def __init__(self, message: str, profile_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.profile_id = profile_id


class Profile(BaseModel):
    """One participant: the reference user or a candidate.

    Labels are compared by exact, case-sensitive string equality. Input
    lists are collapsed to sets, so duplicates carry no weight.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable unique identifier")
    interests: frozenset[str] = Field(..., description="Interest labels")
    communities: frozenset[str] = Field(..., description="Community labels")

    # Display metadata, not used for scoring
    name: Optional[str] = Field(None, description="Display name")
    location: Optional[str] = Field(None, description="City, region")
    avatar: Optional[str] = Field(None, description="Avatar image path or URL")

    def to_dict(self) -> dict:
        """Return a YAML-friendly dict with labels in sorted order."""
        data = self.model_dump(exclude_none=True)
        data["interests"] = sorted(self.interests)
        data["communities"] = sorted(self.communities)
        return data

    @property
    def display_name(self) -> str:
        return self.name or self.id


def coerce_profile(data: Union[Profile, Mapping[str, Any]]) -> Profile:
    """Validate raw profile data, failing fast on malformed input.

    Args:
        data: A Profile instance or a mapping of profile fields.

    Returns:
        Validated Profile.

    Raises:
        InvalidProfileError: If required fields are missing or malformed.
    """
    if isinstance(data, Profile):
        return data

    if not isinstance(data, Mapping):
        raise InvalidProfileError(
            f"Expected a profile mapping, got {type(data).__name__}"
        )

    profile_id = data.get("id")
    try:
        return Profile.model_validate(dict(data))
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"][:1]) for err in e.errors()})
        label = f"Profile {profile_id!r}" if profile_id is not None else "Profile"
        raise InvalidProfileError(
            f"{label} is invalid: bad or missing field(s) {', '.join(fields)}",
            profile_id=str(profile_id) if profile_id is not None else None,
        ) from e
