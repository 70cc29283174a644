"""
Pytest configuration and shared fixtures.
"""

from typing import Any, Callable, Dict, List

import pytest

from circlematch.profile.models import Profile


@pytest.fixture
def make_profile() -> Callable[..., Profile]:
    """Factory for profiles with sensible defaults."""
    def _make(id: str = "p", interests=(), communities=(), **kwargs: Any) -> Profile:
        return Profile(
            id=id,
            interests=frozenset(interests),
            communities=frozenset(communities),
            **kwargs,
        )
    return _make


@pytest.fixture
def reference_data() -> Dict[str, Any]:
    """The sample reference user."""
    return {
        "id": "me",
        "name": "You",
        "location": "San Francisco, CA",
        "interests": ["Technology", "Coffee", "Reading", "Travel", "Photography"],
        "communities": ["Tech Enthusiasts", "Coffee Lovers", "Book Club"],
    }


@pytest.fixture
def candidates_data() -> List[Dict[str, Any]]:
    """The sample candidate pool, including stale display-only scores."""
    return [
        {
            "id": "1",
            "name": "Sarah Wilson",
            "avatar": "/user1.png",
            "location": "San Francisco, CA",
            "interests": ["Technology", "Photography", "Travel", "Music", "Art"],
            "communities": ["Tech Enthusiasts", "Photography Club"],
            "compatibility": 85,
        },
        {
            "id": "2",
            "name": "Mike Chen",
            "avatar": "/user1.png",
            "location": "San Jose, CA",
            "interests": ["Coffee", "Reading", "Technology", "Gaming"],
            "communities": ["Coffee Lovers", "Book Club", "Gaming Community"],
            "compatibility": 78,
        },
        {
            "id": "3",
            "name": "Emma Rodriguez",
            "avatar": "/user1.png",
            "location": "Oakland, CA",
            "interests": ["Reading", "Travel", "Cooking", "Yoga"],
            "communities": ["Book Club", "Travel Enthusiasts"],
            "compatibility": 65,
        },
    ]


@pytest.fixture
def reference(reference_data) -> Profile:
    return Profile.model_validate(reference_data)


@pytest.fixture
def candidates(candidates_data) -> List[Profile]:
    return [Profile.model_validate(c) for c in candidates_data]
