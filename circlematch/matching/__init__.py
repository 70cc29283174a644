"""Matching module for compatibility scoring and ranking."""

from circlematch.matching.ranker import (
    MatchRanker,
    MatchResult,
    compatibility_score,
    compatibility_tier,
    rank,
)
from circlematch.matching.recompute import MatchRecomputer, RecomputeState
from circlematch.matching.similarity import jaccard_ratio, similarity

__all__ = [
    "MatchRanker",
    "MatchResult",
    "MatchRecomputer",
    "RecomputeState",
    "compatibility_score",
    "compatibility_tier",
    "jaccard_ratio",
    "rank",
    "similarity",
]
