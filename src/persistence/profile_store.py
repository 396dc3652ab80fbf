"""Database-backed profile source."""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.matching.compatibility import Skill
from src.persistence import models
from src.profiles.normalize import build_snapshot
from src.profiles.source import ACTIVE_INTEREST_STATUSES
from src.profiles.student import STATUS_IN_TEAM, StudentProfile

logger = logging.getLogger(__name__)


def _to_skill(row: models.Skill) -> Skill:
    return Skill(id=row.id, name=row.name, category=row.category)


def profile_to_student(profile: models.Profile) -> StudentProfile:
    """Convert a Profile row into a normalized StudentProfile."""
    snapshot = build_snapshot(
        skills=[_to_skill(s) for s in profile.skills if s is not None],
        looking_for=[_to_skill(s) for s in profile.looking_for if s is not None],
        availability=[
            {"day_of_week": a.day_of_week, "time_of_day": a.time_of_day}
            for a in profile.availability
        ],
        project_interests=[pi.interest for pi in profile.project_interests],
        team_size_preference=profile.team_size_preference,
    )
    return StudentProfile(
        id=profile.id,
        name=profile.name or "Anonymous",
        major=profile.major or "Undeclared",
        status=profile.status,
        graduation_year=profile.graduation_year,
        bio=profile.bio,
        snapshot=snapshot,
    )


class ProfileStore:
    """Read profiles and interest state from the database."""

    def __init__(self, session: Session):
        """
        Initialize profile store.

        Args:
            session: Database session
        """
        self.session = session

    def get_profile(self, profile_id: str) -> Optional[StudentProfile]:
        """Get a profile by ID."""
        profile = self.session.get(models.Profile, profile_id)
        if profile is None:
            return None
        return profile_to_student(profile)

    def list_candidates(self, viewer_id: str) -> list[StudentProfile]:
        """
        Get the candidate pool for a viewer.

        Only onboarded students who are not already in a team, newest first.

        Args:
            viewer_id: ID of the browsing student

        Returns:
            List of StudentProfile
        """
        stmt = (
            select(models.Profile)
            .where(
                models.Profile.onboarding_completed.is_(True),
                models.Profile.status != STATUS_IN_TEAM,
                models.Profile.id != viewer_id,
            )
            .order_by(models.Profile.created_at.desc())
        )
        profiles = self.session.scalars(stmt).all()
        logger.debug("Loaded %d candidate profiles for %s", len(profiles), viewer_id)
        return [profile_to_student(p) for p in profiles]

    def interested_in(self, viewer_id: str) -> set[str]:
        """Get IDs of students with a pending or accepted request to the viewer."""
        stmt = select(models.InterestRequest.from_user_id).where(
            models.InterestRequest.to_user_id == viewer_id,
            models.InterestRequest.status.in_(ACTIVE_INTEREST_STATUSES),
        )
        return set(self.session.scalars(stmt).all())

    def has_mutual_interest(self, viewer_id: str, candidate_id: str) -> bool:
        """Whether the candidate has signaled interest in the viewer."""
        stmt = (
            select(models.InterestRequest.id)
            .where(
                models.InterestRequest.from_user_id == candidate_id,
                models.InterestRequest.to_user_id == viewer_id,
                models.InterestRequest.status.in_(ACTIVE_INTEREST_STATUSES),
            )
            .limit(1)
        )
        return self.session.scalars(stmt).first() is not None
