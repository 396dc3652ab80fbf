"""Scorer protocol for pluggable scoring engines.

Defines the interface the candidate ranker depends on.
CompatibilityScorer is the rule-based implementation; any engine that
returns a CompatibilityScore can be swapped in.
"""
from typing import Protocol, runtime_checkable

from src.matching.compatibility import CompatibilityScore, ProfileSnapshot


@runtime_checkable
class Scorer(Protocol):
    """Protocol for teammate scoring engines."""

    def score(
        self,
        viewer: ProfileSnapshot,
        candidate: ProfileSnapshot,
        mutual_interest: bool = False,
    ) -> CompatibilityScore:
        """Score a single candidate against the viewer."""
        ...
