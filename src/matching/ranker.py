"""Candidate ranking and filtering for the student listing."""
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from src.matching.compatibility import CompatibilityScore, CompatibilityScorer, ProfileSnapshot
from src.matching.scorer_protocol import Scorer
from src.profiles.exceptions import ProfileNotFoundError
from src.profiles.normalize import normalize_day
from src.profiles.source import ProfileSource
from src.profiles.student import StudentProfile

logger = logging.getLogger(__name__)

# Badge tiers used by the profile card
HIGH_MATCH_THRESHOLD = 70
MEDIUM_MATCH_THRESHOLD = 50

# A candidate must satisfy at least this many of the active filters
MIN_FILTER_MATCHES = 2


def score_label(total: int) -> str:
    """Map a total score to the card badge tier."""
    if total >= HIGH_MATCH_THRESHOLD:
        return "high"
    if total >= MEDIUM_MATCH_THRESHOLD:
        return "medium"
    return "low"


@dataclass
class RankedCandidate:
    """A candidate with their compatibility against the viewer."""

    profile: StudentProfile
    compatibility: CompatibilityScore
    mutual_interest: bool = False

    @property
    def score(self) -> int:
        return self.compatibility.total

    @property
    def label(self) -> str:
        return score_label(self.compatibility.total)


@dataclass
class CandidateFilters:
    """Listing filters. Empty values are inactive."""

    search: str = ""
    skill_ids: list[str] = field(default_factory=list)
    days: list[str] = field(default_factory=list)
    project_interests: list[str] = field(default_factory=list)
    team_size: Optional[int] = None
    status: Optional[str] = None

    @property
    def active_count(self) -> int:
        return sum(
            (
                bool(self.search),
                bool(self.skill_ids),
                bool(self.days),
                bool(self.project_interests),
                self.team_size is not None,
                self.status is not None,
            )
        )


def _matched_filter_count(profile: StudentProfile, filters: CandidateFilters) -> int:
    snapshot = profile.snapshot
    count = 0

    if filters.search:
        query = filters.search.lower()
        if query in (profile.name or "").lower() or query in (profile.major or "").lower():
            count += 1

    if filters.skill_ids:
        if snapshot.skill_ids & set(filters.skill_ids):
            count += 1

    if filters.days:
        profile_days = {day for day, _ in snapshot.availability}
        if any(normalize_day(day) in profile_days for day in filters.days):
            count += 1

    if filters.project_interests:
        interests = [i.lower() for i in snapshot.project_interests]
        if any(
            selected.lower() in interest
            for selected in filters.project_interests
            for interest in interests
        ):
            count += 1

    if filters.team_size is not None:
        if snapshot.team_size_preference == filters.team_size:
            count += 1

    if filters.status is not None:
        if profile.status == filters.status:
            count += 1

    return count


def filter_candidates(
    candidates: Iterable[StudentProfile],
    filters: Optional[CandidateFilters] = None,
) -> list[StudentProfile]:
    """
    Apply listing filters.

    Filters are lenient: a candidate is kept when it satisfies at least two
    of the active filters (or all of them when fewer than two are active).

    Args:
        candidates: Candidate profiles in display order
        filters: Active filters, or None for no filtering

    Returns:
        Candidates that pass, in the original order
    """
    candidates = list(candidates)
    if filters is None or filters.active_count == 0:
        return candidates

    required = min(MIN_FILTER_MATCHES, filters.active_count)
    return [c for c in candidates if _matched_filter_count(c, filters) >= required]


class CandidateRanker:
    """Score and rank candidate teammates for a viewer."""

    def __init__(self, scorer: Optional[Scorer] = None, min_score: float = 0):
        """
        Initialize candidate ranker.

        Args:
            scorer: Scoring engine (defaults to CompatibilityScorer)
            min_score: Minimum total score to include (0-100)
        """
        self.scorer = scorer or CompatibilityScorer()
        self.min_score = min_score

    def rank(
        self,
        viewer: ProfileSnapshot,
        candidates: Iterable[StudentProfile],
        mutual_ids: Iterable[str] = (),
    ) -> list[RankedCandidate]:
        """
        Score candidates against the viewer and sort them.

        Args:
            viewer: Snapshot of the browsing student
            candidates: Candidate profiles, in the order the source returned them
            mutual_ids: Ids of candidates who have expressed interest in the viewer

        Returns:
            RankedCandidate list sorted by score descending. Equal scores
            keep their input order.
        """
        mutual = set(mutual_ids)
        ranked: list[RankedCandidate] = []

        for candidate in candidates:
            has_mutual = candidate.id in mutual
            result = self.scorer.score(viewer, candidate.snapshot, has_mutual)

            if result.total < self.min_score:
                continue

            ranked.append(
                RankedCandidate(
                    profile=candidate,
                    compatibility=result,
                    mutual_interest=has_mutual,
                )
            )

        # list.sort is stable, so ties stay in source order
        ranked.sort(key=lambda r: r.score, reverse=True)

        return ranked

    def rank_for(
        self,
        source: ProfileSource,
        viewer_id: str,
        filters: Optional[CandidateFilters] = None,
    ) -> list[RankedCandidate]:
        """
        Rank the candidate pool a profile source offers a viewer.

        Raises:
            ProfileNotFoundError: If the viewer does not exist
        """
        viewer = source.get_profile(viewer_id)
        if viewer is None:
            raise ProfileNotFoundError(viewer_id)

        pool = source.list_candidates(viewer_id)
        candidates = filter_candidates(pool, filters)
        mutual_ids = source.interested_in(viewer_id)

        ranked = self.rank(viewer.snapshot, candidates, mutual_ids)
        logger.info(
            "Ranked %d of %d candidates for %s (%d with mutual interest)",
            len(ranked),
            len(pool),
            viewer_id,
            sum(1 for r in ranked if r.mutual_interest),
        )
        return ranked

    def filter_by_score(
        self,
        ranked: list[RankedCandidate],
        min_score: Optional[float] = None,
    ) -> list[RankedCandidate]:
        """Filter ranked candidates by minimum score."""
        threshold = min_score if min_score is not None else self.min_score
        return [r for r in ranked if r.score >= threshold]

    def get_top(
        self,
        ranked: list[RankedCandidate],
        n: int = 10,
    ) -> list[RankedCandidate]:
        """Get top N candidates by score."""
        return ranked[:n]
