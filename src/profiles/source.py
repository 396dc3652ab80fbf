"""Profile source protocol.

The ranker reads profiles through this interface so the same ranking code
runs against the database (ProfileStore) or a YAML file (ProfileDirectory).
"""
from typing import Optional, Protocol, runtime_checkable

from src.profiles.student import StudentProfile

# Interest request statuses that count toward the mutual interest boost
ACTIVE_INTEREST_STATUSES = ("pending", "accepted")
INTEREST_STATUSES = ("pending", "accepted", "declined")


@runtime_checkable
class ProfileSource(Protocol):
    """Read access to student profiles and interest state."""

    def get_profile(self, profile_id: str) -> Optional[StudentProfile]:
        """Return one profile, or None if it does not exist."""
        ...

    def list_candidates(self, viewer_id: str) -> list[StudentProfile]:
        """Return the candidate pool for a viewer, newest first.

        Excludes the viewer, students already in a team, and profiles that
        have not finished onboarding.
        """
        ...

    def interested_in(self, viewer_id: str) -> set[str]:
        """Return ids of students with a pending or accepted request to the viewer."""
        ...
