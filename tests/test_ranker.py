"""Tests for candidate ranking and listing filters."""
import pytest

from src.matching.compatibility import CompatibilityScore, ScoreBreakdown
from src.matching.ranker import (
    CandidateFilters,
    CandidateRanker,
    RankedCandidate,
    filter_candidates,
    score_label,
)
from src.profiles.exceptions import ProfileNotFoundError


@pytest.fixture
def viewer(make_snapshot):
    return make_snapshot(has="ab", needs="x", availability=[("monday", "morning")], team_size=3)


@pytest.fixture
def candidates(make_student):
    """Three candidates in source (recency) order: poor, good, mid."""
    return [
        make_student("poor", has="ab", needs="z"),
        make_student(
            "good", has="xy", needs="a", availability=[("monday", "morning")], team_size=3
        ),
        make_student("mid", has="x"),
    ]


class FixedScorer:
    """Scorer stub returning preset totals by candidate team size."""

    def __init__(self, totals):
        self.totals = totals

    def score(self, viewer, candidate, mutual_interest=False):
        total = self.totals[candidate.team_size_preference]
        return CompatibilityScore(
            total=total,
            breakdown=ScoreBreakdown(0, 0, 0, 0, 0, 100 if mutual_interest else 0),
        )


class FakeSource:
    """In-memory ProfileSource for rank_for tests."""

    def __init__(self, viewer, candidates, interested=()):
        self.viewer = viewer
        self.candidates = candidates
        self.interested = set(interested)

    def get_profile(self, profile_id):
        return self.viewer if self.viewer and self.viewer.id == profile_id else None

    def list_candidates(self, viewer_id):
        return list(self.candidates)

    def interested_in(self, viewer_id):
        return set(self.interested)


class TestScoreLabel:
    @pytest.mark.parametrize(
        "total,label",
        [(100, "high"), (70, "high"), (69, "medium"), (50, "medium"), (49, "low"), (0, "low")],
    )
    def test_tiers(self, total, label):
        assert score_label(total) == label


class TestCandidateRanker:
    """Tests for CandidateRanker.rank."""

    def test_sorted_by_score_descending(self, viewer, candidates):
        ranked = CandidateRanker().rank(viewer, candidates)

        assert [r.profile.id for r in ranked] == ["good", "mid", "poor"]
        assert [r.score for r in ranked] == [82, 45, 17]
        assert all(isinstance(r, RankedCandidate) for r in ranked)

    def test_labels(self, viewer, candidates):
        ranked = CandidateRanker().rank(viewer, candidates)
        assert [r.label for r in ranked] == ["high", "low", "low"]

    def test_mutual_interest_boost(self, viewer, candidates):
        ranked = CandidateRanker().rank(viewer, candidates, mutual_ids={"mid"})
        by_id = {r.profile.id: r for r in ranked}

        assert by_id["mid"].mutual_interest is True
        assert by_id["mid"].score == 50
        assert by_id["mid"].label == "medium"
        assert by_id["good"].mutual_interest is False
        assert by_id["good"].score == 82

    def test_ties_keep_input_order(self, make_student, viewer):
        first = make_student("first", has="c")
        second = make_student("second", has="c")

        ranker = CandidateRanker()
        assert [r.profile.id for r in ranker.rank(viewer, [first, second])] == ["first", "second"]
        assert [r.profile.id for r in ranker.rank(viewer, [second, first])] == ["second", "first"]

    def test_min_score(self, viewer, candidates):
        ranked = CandidateRanker(min_score=45).rank(viewer, candidates)
        assert [r.profile.id for r in ranked] == ["good", "mid"]

    def test_empty_pool(self, viewer):
        assert CandidateRanker().rank(viewer, []) == []

    def test_custom_scorer(self, make_student, make_snapshot):
        scorer = FixedScorer({2: 10, 3: 90, 4: 50})
        pool = [
            make_student("two", team_size=2),
            make_student("three", team_size=3),
            make_student("four", team_size=4),
        ]

        ranked = CandidateRanker(scorer=scorer).rank(make_snapshot(), pool, mutual_ids=["two"])

        assert [r.profile.id for r in ranked] == ["three", "four", "two"]
        assert ranked[-1].compatibility.breakdown.mutual_interest_boost == 100

    def test_filter_by_score(self, viewer, candidates):
        ranker = CandidateRanker(min_score=40)
        ranked = CandidateRanker().rank(viewer, candidates)

        assert [r.profile.id for r in ranker.filter_by_score(ranked)] == ["good", "mid"]
        assert [r.profile.id for r in ranker.filter_by_score(ranked, min_score=80)] == ["good"]

    def test_get_top(self, viewer, candidates):
        ranker = CandidateRanker()
        ranked = ranker.rank(viewer, candidates)

        assert [r.profile.id for r in ranker.get_top(ranked, 2)] == ["good", "mid"]
        assert len(ranker.get_top(ranked, 10)) == 3


class TestRankFor:
    """Tests for ranking through a ProfileSource."""

    def test_rank_for(self, make_student, candidates):
        viewer = make_student(
            "viewer", has="ab", needs="x", availability=[("monday", "morning")], team_size=3
        )
        source = FakeSource(viewer, candidates, interested={"poor"})

        ranked = CandidateRanker().rank_for(source, "viewer")

        assert [r.profile.id for r in ranked] == ["good", "mid", "poor"]
        assert ranked[-1].mutual_interest is True
        assert ranked[-1].score == 22

    def test_rank_for_applies_filters(self, make_student, candidates):
        viewer = make_student("viewer", has="ab")
        source = FakeSource(viewer, candidates)

        ranked = CandidateRanker().rank_for(source, "viewer", CandidateFilters(skill_ids=["y"]))

        assert [r.profile.id for r in ranked] == ["good"]

    def test_unknown_viewer(self, candidates):
        source = FakeSource(None, candidates)

        with pytest.raises(ProfileNotFoundError) as exc_info:
            CandidateRanker().rank_for(source, "ghost")
        assert exc_info.value.profile_id == "ghost"


class TestFilterCandidates:
    """Lenient listing filters."""

    @pytest.fixture
    def pool(self, make_student):
        return [
            make_student(
                "ana", name="Ana Lima", major="Design", has="e",
                availability=[("tuesday", "evening")], interests=["Climate tech"], team_size=3,
            ),
            make_student(
                "ben", name="Ben Ode", major="Computer Science", has="ax",
                availability=[("monday", "morning")], interests=["fintech"], team_size=4,
                status="open_to_offers",
            ),
            make_student(
                "cai", name="Cai Wu", major="Mathematics", has="y",
                availability=[("saturday", "afternoon")], team_size=2,
            ),
        ]

    def _ids(self, profiles):
        return [p.id for p in profiles]

    def test_no_filters_keeps_everyone(self, pool):
        assert self._ids(filter_candidates(pool)) == ["ana", "ben", "cai"]
        assert self._ids(filter_candidates(pool, CandidateFilters())) == ["ana", "ben", "cai"]

    def test_search_matches_name_or_major(self, pool):
        assert self._ids(filter_candidates(pool, CandidateFilters(search="computer"))) == ["ben"]
        assert self._ids(filter_candidates(pool, CandidateFilters(search="WU"))) == ["cai"]

    def test_skill_filter_any(self, pool):
        filters = CandidateFilters(skill_ids=["e", "y"])
        assert self._ids(filter_candidates(pool, filters)) == ["ana", "cai"]

    def test_day_filter_accepts_abbreviations(self, pool):
        filters = CandidateFilters(days=["Mon", "Sat"])
        assert self._ids(filter_candidates(pool, filters)) == ["ben", "cai"]

    def test_interest_filter_substring(self, pool):
        filters = CandidateFilters(project_interests=["climate"])
        assert self._ids(filter_candidates(pool, filters)) == ["ana"]

    def test_team_size_and_status(self, pool):
        assert self._ids(filter_candidates(pool, CandidateFilters(team_size=2))) == ["cai"]
        assert self._ids(filter_candidates(pool, CandidateFilters(status="open_to_offers"))) == ["ben"]

    def test_two_filters_both_required(self, pool):
        filters = CandidateFilters(skill_ids=["a"], team_size=3)
        assert filter_candidates(pool, filters) == []

    def test_three_filters_any_two(self, pool):
        # ana: team size + interest; ben: skill only; cai: none
        filters = CandidateFilters(skill_ids=["a"], team_size=3, project_interests=["climate"])
        assert self._ids(filter_candidates(pool, filters)) == ["ana"]

    def test_active_count(self):
        assert CandidateFilters().active_count == 0
        assert CandidateFilters(search="x", days=["Mon"], team_size=2).active_count == 3
