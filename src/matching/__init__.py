"""Teammate compatibility scoring and ranking."""
from .compatibility import (
    CompatibilityScore,
    CompatibilityScorer,
    ProfileSnapshot,
    ScoreBreakdown,
    Skill,
    calculate_compatibility_score,
)
from .ranker import CandidateFilters, CandidateRanker, RankedCandidate

__all__ = [
    "CompatibilityScore",
    "CompatibilityScorer",
    "ProfileSnapshot",
    "ScoreBreakdown",
    "Skill",
    "calculate_compatibility_score",
    "CandidateFilters",
    "CandidateRanker",
    "RankedCandidate",
]
