"""Pytest fixtures for Team Radar tests."""
import sys
from datetime import datetime
from pathlib import Path

import pytest
import yaml
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.matching.compatibility import ProfileSnapshot, Skill
from src.persistence.models import Availability, Base, InterestRequest, Profile, ProjectInterest
from src.persistence.models import Skill as SkillRow
from src.profiles.student import StudentProfile


# =============================================================================
# SCORING FIXTURES
# =============================================================================


@pytest.fixture
def skills():
    """A small skill catalog keyed by id."""
    return {
        sid: Skill(id=sid, name=name, category=category)
        for sid, name, category in [
            ("a", "Python", "Programming"),
            ("b", "React", "Frontend"),
            ("c", "SQL", "Data"),
            ("d", "Docker", "DevOps"),
            ("e", "Figma", "Design"),
            ("f", "Pitching", "Business"),
            ("g", "Rust", "Programming"),
            ("x", "Machine Learning", "Data"),
            ("y", "Statistics", "Data"),
            ("z", "Marketing", "Business"),
        ]
    }


@pytest.fixture
def make_snapshot(skills):
    """Factory building ProfileSnapshot from skill ids and plain values."""

    def _make(
        has="",
        needs="",
        availability=(),
        interests=(),
        team_size=None,
    ) -> ProfileSnapshot:
        return ProfileSnapshot(
            skills=frozenset(skills[s] for s in has),
            looking_for=frozenset(skills[s] for s in needs),
            availability=frozenset(availability),
            project_interests=tuple(interests),
            team_size_preference=team_size,
        )

    return _make


@pytest.fixture
def make_student(make_snapshot):
    """Factory building StudentProfile records for ranking tests."""

    def _make(profile_id, name=None, major="Computer Science", status="looking", **snapshot_kwargs):
        return StudentProfile(
            id=profile_id,
            name=name or profile_id.title(),
            major=major,
            status=status,
            snapshot=make_snapshot(**snapshot_kwargs),
        )

    return _make


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def skill_rows(test_db):
    """Persist a skill catalog."""
    rows = {
        "py": SkillRow(id="py", name="Python", category="Programming"),
        "js": SkillRow(id="js", name="JavaScript", category="Programming"),
        "ux": SkillRow(id="ux", name="UX Design", category="Design"),
        "ml": SkillRow(id="ml", name="Machine Learning", category="Data"),
    }
    test_db.add_all(rows.values())
    test_db.commit()
    return rows


@pytest.fixture
def profile_factory(test_db, skill_rows):
    """
    Factory fixture to create stored profiles.

    Usage:
        alice = profile_factory("alice", skills=["py"], days=[("Mon", "Evening")])
    """

    def _create(
        profile_id,
        skills=(),
        looking_for=(),
        days=(),
        interests=(),
        team_size=None,
        status="looking",
        onboarding_completed=True,
        created_at=None,
        name=None,
    ):
        profile = Profile(
            id=profile_id,
            name=name or profile_id.title(),
            major="Computer Science",
            status=status,
            team_size_preference=team_size,
            onboarding_completed=onboarding_completed,
            created_at=created_at or datetime(2026, 1, 1),
        )
        profile.skills = [skill_rows[s] for s in skills]
        profile.looking_for = [skill_rows[s] for s in looking_for]
        profile.availability = [
            Availability(day_of_week=day, time_of_day=slot) for day, slot in days
        ]
        profile.project_interests = [ProjectInterest(interest=i) for i in interests]
        test_db.add(profile)
        test_db.commit()
        return profile

    return _create


@pytest.fixture
def interest_factory(test_db):
    """Factory fixture to record interest requests."""

    def _create(from_user_id, to_user_id, status="pending"):
        request = InterestRequest(
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            status=status,
        )
        test_db.add(request)
        test_db.commit()
        return request

    return _create


# =============================================================================
# PROFILES FILE FIXTURES
# =============================================================================


@pytest.fixture
def profiles_document():
    """A valid profiles.yaml document as a dict."""
    return {
        "skills": [
            {"id": "python", "name": "Python", "category": "Programming"},
            {"id": "react", "name": "React", "category": "Frontend"},
            {"id": "figma", "name": "Figma", "category": "Design"},
            {"id": "ml", "name": "Machine Learning", "category": "Data"},
            {"id": "sql", "name": "SQL", "category": "Data"},
            {"id": "pitch", "name": "Pitching", "category": "Business"},
        ],
        "profiles": [
            {
                "id": "alice",
                "name": "Alice Chen",
                "major": "Computer Science",
                "skills": ["python", "ml"],
                "looking_for": ["react", "figma"],
                "availability": [
                    {"day_of_week": "Mon", "time_slot": "Evening"},
                    {"day_of_week": "Wed", "time_slot": "Evening"},
                    {"day_of_week": "Sat", "time_slot": "Morning"},
                ],
                "project_interests": ["NLP", "climate tech"],
                "team_size_preference": 3,
            },
            {
                "id": "bruno",
                "name": "Bruno Alves",
                "major": "Design",
                "status": "open_to_offers",
                "skills": ["figma", "react"],
                "looking_for": ["python"],
                "availability": [
                    {"day_of_week": "monday", "time_slot": "evening"},
                    {"day_of_week": "saturday", "time_of_day": "morning"},
                ],
                "project_interests": ["natural language processing", "nlp tooling"],
                "team_size_preference": 3,
            },
            {
                "id": "chloe",
                "name": "Chloe Martin",
                "major": "Statistics",
                "skills": ["python", "ml", "sql"],
                "looking_for": ["pitch"],
                "availability": [{"day_of_week": "Tue", "time_slot": "Afternoon"}],
                "project_interests": ["fintech"],
                "team_size_preference": 4,
            },
            {
                "id": "dev",
                "name": "Dev Patel",
                "major": "Business",
                "status": "in_team",
                "skills": ["pitch"],
            },
            {
                "id": "emma",
                "name": "Emma Rossi",
                "skills": ["react"],
                "onboarding_completed": False,
            },
        ],
        "interests": [
            {"from_user": "bruno", "to_user": "alice", "status": "pending"},
            {"from_user": "chloe", "to_user": "alice", "status": "declined"},
            {"from_user": "alice", "to_user": "chloe", "status": "pending"},
        ],
    }


@pytest.fixture
def profiles_file(tmp_path, profiles_document):
    """Write the profiles document to a temporary YAML file."""
    path = tmp_path / "profiles.yaml"
    with open(path, "w") as f:
        yaml.dump(profiles_document, f)
    return path
