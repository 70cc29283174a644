"""Compatibility scoring and ranking of candidate profiles.

Compatibility formula:
- interest similarity * 0.7
- community similarity * 0.3

The weighted sum is rounded half up to an integer percentage. Scores are
combined as exact fractions, so a sum of exactly 74.5 always becomes 75.
"""

import logging
import math
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from circlematch.matching.similarity import jaccard_ratio
from circlematch.profile.models import Profile, coerce_profile

logger = logging.getLogger(__name__)

ProfileInput = Union[Profile, Mapping[str, Any]]

# Weights for each category (must sum to 1)
INTEREST_WEIGHT = Fraction(7, 10)
COMMUNITY_WEIGHT = Fraction(3, 10)

# Tier thresholds
HIGH_MATCH_THRESHOLD = 80
GOOD_MATCH_THRESHOLD = 60


def round_half_up(value: Fraction) -> int:
    """Round a non-negative value to the nearest integer, halves going up."""
    return math.floor(value + Fraction(1, 2))


def compatibility_tier(score: int) -> str:
    """Return the display tier for a compatibility score."""
    if score >= HIGH_MATCH_THRESHOLD:
        return "High Match"
    if score >= GOOD_MATCH_THRESHOLD:
        return "Good Match"
    return "Low Match"


@dataclass
class MatchResult:
    """Compatibility of one candidate against the reference profile."""
    candidate_id: str
    compatibility: int                  # Weighted score, 0-100
    shared_interests: frozenset = field(default_factory=frozenset)
    shared_communities: frozenset = field(default_factory=frozenset)
    interest_score: float = 0.0         # Interest similarity before weighting
    community_score: float = 0.0        # Community similarity before weighting
    candidate: Optional[Profile] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "candidate_id": self.candidate_id,
            "compatibility": self.compatibility,
            "tier": self.tier,
            "shared_interests": sorted(self.shared_interests),
            "shared_communities": sorted(self.shared_communities),
            "breakdown": {
                "interests": round(self.interest_score, 1),
                "communities": round(self.community_score, 1),
            },
        }

    @property
    def tier(self) -> str:
        return compatibility_tier(self.compatibility)


def compatibility_score(reference: ProfileInput, candidate: ProfileInput) -> int:
    """Compute the 0-100 compatibility of a candidate for a reference profile."""
    reference = coerce_profile(reference)
    candidate = coerce_profile(candidate)
    return _weighted_score(
        jaccard_ratio(reference.interests, candidate.interests),
        jaccard_ratio(reference.communities, candidate.communities),
    )


def _weighted_score(interest_ratio: Fraction, community_ratio: Fraction) -> int:
    total = (interest_ratio * INTEREST_WEIGHT + community_ratio * COMMUNITY_WEIGHT) * 100
    return round_half_up(total)


class MatchRanker:
    """Scores candidates against a reference profile and orders them."""

    def score(self, reference: Profile, candidate: Profile) -> MatchResult:
        """Score a single validated candidate.

        Args:
            reference: The profile matches are computed for
            candidate: Candidate profile

        Returns:
            MatchResult with shared labels and score breakdown
        """
        interest_ratio = jaccard_ratio(reference.interests, candidate.interests)
        community_ratio = jaccard_ratio(reference.communities, candidate.communities)

        return MatchResult(
            candidate_id=candidate.id,
            compatibility=_weighted_score(interest_ratio, community_ratio),
            shared_interests=reference.interests & candidate.interests,
            shared_communities=reference.communities & candidate.communities,
            interest_score=float(interest_ratio * 100),
            community_score=float(community_ratio * 100),
            candidate=candidate,
        )

    def validate(
        self,
        reference: ProfileInput,
        candidates: Iterable[ProfileInput],
    ) -> tuple:
        """Validate the reference and every candidate before any scoring.

        Returns:
            (reference, candidates) as Profile instances

        Raises:
            InvalidProfileError: On the first malformed profile
        """
        return coerce_profile(reference), [coerce_profile(c) for c in candidates]

    def rank(
        self,
        reference: ProfileInput,
        candidates: Iterable[ProfileInput],
    ) -> List[MatchResult]:
        """Rank candidates by compatibility (highest first).

        Candidates with equal compatibility keep their input order.

        Args:
            reference: The profile matches are computed for
            candidates: Candidate pool

        Returns:
            New list of MatchResults, empty for an empty pool
        """
        reference, pool = self.validate(reference, candidates)

        results = [self.score(reference, candidate) for candidate in pool]
        # list.sort is stable, so ties keep input order
        results.sort(key=lambda r: r.compatibility, reverse=True)

        logger.info(f"Ranked {len(results)} candidates for {reference.id}")
        return results


def rank(
    reference: ProfileInput,
    candidates: Iterable[ProfileInput],
) -> List[MatchResult]:
    """Rank candidates with a default MatchRanker."""
    return MatchRanker().rank(reference, candidates)
