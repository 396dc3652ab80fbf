"""Teammate compatibility scoring.

Scores a candidate teammate against the viewing student's profile using six
weighted factors:

- Skill complementarity: 30% (do they cover what each other is looking for)
- Availability overlap: 25% (shared weekly time slots)
- Project interest alignment: 20% (loose tag matching)
- Team size compatibility: 10%
- Skill diversity bonus: 10% (some shared ground, not identical skillsets)
- Mutual interest boost: 5% (supplied by the caller)

The scorer is pure: no I/O, no logging, and it never raises on well-typed
input. Empty collections fall back to neutral (50) or zero defaults.
"""
import math
from dataclasses import asdict, dataclass, field
from typing import Optional

# Factor weights (sum to 1.0)
WEIGHT_SKILL_COMPLEMENTARITY = 0.30
WEIGHT_AVAILABILITY_OVERLAP = 0.25
WEIGHT_PROJECT_INTEREST_ALIGNMENT = 0.20
WEIGHT_TEAM_SIZE_COMPATIBILITY = 0.10
WEIGHT_SKILL_DIVERSITY_BONUS = 0.10
WEIGHT_MUTUAL_INTEREST_BOOST = 0.05

NEUTRAL_SCORE = 50.0
NEUTRAL_SATISFACTION = 0.5  # one side expressed no needs

# Team size ladder
TEAM_SIZE_EXACT_SCORE = 100.0
TEAM_SIZE_OFF_BY_ONE_SCORE = 75.0
TEAM_SIZE_PENALTY_PER_STEP = 25.0

# Skill diversity: (max overlap ratio, score), checked in order.
# A ratio of exactly 0 is handled separately.
DISJOINT_SKILLS_SCORE = 70.0
DIVERSITY_BRACKETS = (
    (0.3, 100.0),
    (0.5, 80.0),
    (0.7, 50.0),
)
REDUNDANT_SKILLS_SCORE = 20.0

MUTUAL_INTEREST_SCORE = 100.0


@dataclass(frozen=True)
class Skill:
    """A skill from the shared catalog. Identity is the id alone."""

    id: str
    name: str = field(default="", compare=False)
    category: str = field(default="", compare=False)


@dataclass(frozen=True)
class ProfileSnapshot:
    """The scoring-relevant slice of a student profile."""

    skills: frozenset[Skill] = frozenset()
    looking_for: frozenset[Skill] = frozenset()
    availability: frozenset[tuple[str, str]] = frozenset()  # (day_of_week, time_slot)
    project_interests: tuple[str, ...] = ()
    team_size_preference: Optional[int] = None

    @property
    def skill_ids(self) -> frozenset[str]:
        return frozenset(s.id for s in self.skills)

    @property
    def looking_for_ids(self) -> frozenset[str]:
        return frozenset(s.id for s in self.looking_for)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-factor sub-scores, each rounded to an integer 0-100."""

    skill_complementarity: int
    availability_overlap: int
    project_interest_alignment: int
    team_size_compatibility: int
    skill_diversity_bonus: int
    mutual_interest_boost: int


@dataclass(frozen=True)
class CompatibilityScore:
    """Result of scoring one candidate against a viewer."""

    total: int  # 0-100
    breakdown: ScoreBreakdown

    def to_dict(self) -> dict:
        return {"total": self.total, "breakdown": asdict(self.breakdown)}


def _clamp(value: float) -> float:
    return min(100.0, max(0.0, value))


def round_half_up(value: float) -> int:
    """Round .5 upwards (Python's round() uses banker's rounding)."""
    return int(math.floor(value + 0.5))


class CompatibilityScorer:
    """Score candidate teammates against a viewer profile."""

    def score(
        self,
        viewer: ProfileSnapshot,
        candidate: ProfileSnapshot,
        mutual_interest: bool = False,
    ) -> CompatibilityScore:
        """
        Score a candidate against the viewer.

        Args:
            viewer: Snapshot of the student doing the browsing
            candidate: Snapshot of the potential teammate
            mutual_interest: Whether the candidate has already signaled
                interest in the viewer

        Returns:
            CompatibilityScore with total and per-factor breakdown
        """
        skill_score = _clamp(self._skill_complementarity(viewer, candidate))
        availability_score = _clamp(
            self._availability_overlap(viewer.availability, candidate.availability)
        )
        interest_score = _clamp(
            self._project_interest_alignment(
                viewer.project_interests, candidate.project_interests
            )
        )
        team_size_score = _clamp(
            self._team_size_compatibility(
                viewer.team_size_preference, candidate.team_size_preference
            )
        )
        diversity_score = _clamp(
            self._skill_diversity(viewer.skill_ids, candidate.skill_ids)
        )
        mutual_score = MUTUAL_INTEREST_SCORE if mutual_interest else 0.0

        total = math.fsum(
            (
                skill_score * WEIGHT_SKILL_COMPLEMENTARITY,
                availability_score * WEIGHT_AVAILABILITY_OVERLAP,
                interest_score * WEIGHT_PROJECT_INTEREST_ALIGNMENT,
                team_size_score * WEIGHT_TEAM_SIZE_COMPATIBILITY,
                diversity_score * WEIGHT_SKILL_DIVERSITY_BONUS,
                mutual_score * WEIGHT_MUTUAL_INTEREST_BOOST,
            )
        )

        # Drop float noise from the weights so 44.4999999 rounds like 44.5
        total = round(total, 9)

        return CompatibilityScore(
            total=min(100, max(0, round_half_up(total))),
            breakdown=ScoreBreakdown(
                skill_complementarity=round_half_up(skill_score),
                availability_overlap=round_half_up(availability_score),
                project_interest_alignment=round_half_up(interest_score),
                team_size_compatibility=round_half_up(team_size_score),
                skill_diversity_bonus=round_half_up(diversity_score),
                mutual_interest_boost=round_half_up(mutual_score),
            ),
        )

    def _skill_complementarity(
        self, viewer: ProfileSnapshot, candidate: ProfileSnapshot
    ) -> float:
        """Bidirectional need satisfaction.

        Averages how much of the viewer's "looking for" list the candidate
        has with how much of the candidate's list the viewer has.
        """
        viewer_need = viewer.looking_for_ids
        candidate_need = candidate.looking_for_ids

        if viewer_need:
            viewer_satisfied = len(viewer_need & candidate.skill_ids) / len(viewer_need)
        else:
            viewer_satisfied = NEUTRAL_SATISFACTION

        if candidate_need:
            candidate_satisfied = len(candidate_need & viewer.skill_ids) / len(candidate_need)
        else:
            candidate_satisfied = NEUTRAL_SATISFACTION

        return (viewer_satisfied + candidate_satisfied) / 2 * 100

    def _availability_overlap(
        self,
        viewer_slots: frozenset[tuple[str, str]],
        candidate_slots: frozenset[tuple[str, str]],
    ) -> float:
        """Shared time slots relative to the smaller schedule.

        No availability on either side means they cannot be scheduled
        together, so this returns 0 rather than a neutral score.
        """
        if not viewer_slots or not candidate_slots:
            return 0.0

        viewer_set = {(day.lower(), slot.lower()) for day, slot in viewer_slots}
        candidate_set = {(day.lower(), slot.lower()) for day, slot in candidate_slots}

        overlap = len(viewer_set & candidate_set)
        return overlap / min(len(viewer_set), len(candidate_set)) * 100

    def _project_interest_alignment(
        self, viewer_interests: tuple[str, ...], candidate_interests: tuple[str, ...]
    ) -> float:
        """Fraction of the viewer's interests that loosely match the candidate's.

        A match is substring containment in either direction, so "nlp" and
        "nlp tooling" match. Relative to the viewer's interest count only.
        """
        if not viewer_interests or not candidate_interests:
            return NEUTRAL_SCORE

        viewer_normalized = [i.strip().lower() for i in viewer_interests]
        candidate_normalized = [i.strip().lower() for i in candidate_interests]

        matches = 0
        for interest in viewer_normalized:
            if any(
                interest in other or other in interest
                for other in candidate_normalized
            ):
                matches += 1

        return matches / len(viewer_interests) * 100

    def _team_size_compatibility(
        self, viewer_size: Optional[int], candidate_size: Optional[int]
    ) -> float:
        if viewer_size is None or candidate_size is None:
            return NEUTRAL_SCORE

        diff = abs(viewer_size - candidate_size)
        if diff == 0:
            return TEAM_SIZE_EXACT_SCORE
        if diff == 1:
            return TEAM_SIZE_OFF_BY_ONE_SCORE
        return max(0.0, 100.0 - diff * TEAM_SIZE_PENALTY_PER_STEP)

    def _skill_diversity(
        self, viewer_skills: frozenset[str], candidate_skills: frozenset[str]
    ) -> float:
        """Favor light overlap; penalize near-identical skillsets.

        Fully disjoint skillsets score moderately since the pair may lack
        common ground.
        """
        if not viewer_skills or not candidate_skills:
            return NEUTRAL_SCORE

        overlap = len(viewer_skills & candidate_skills)
        ratio = overlap / min(len(viewer_skills), len(candidate_skills))

        if ratio == 0:
            return DISJOINT_SKILLS_SCORE
        for upper_bound, bracket_score in DIVERSITY_BRACKETS:
            if ratio <= upper_bound:
                return bracket_score
        return REDUNDANT_SKILLS_SCORE


_default_scorer = CompatibilityScorer()


def calculate_compatibility_score(
    viewer: ProfileSnapshot,
    candidate: ProfileSnapshot,
    mutual_interest: bool = False,
) -> CompatibilityScore:
    """Score a candidate against the viewer with the default scorer."""
    return _default_scorer.score(viewer, candidate, mutual_interest)
