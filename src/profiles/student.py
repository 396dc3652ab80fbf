"""Student profile records shown in candidate listings."""
from dataclasses import dataclass, field
from typing import Optional

from src.matching.compatibility import ProfileSnapshot

STATUS_LOOKING = "looking"
STATUS_OPEN_TO_OFFERS = "open_to_offers"
STATUS_IN_TEAM = "in_team"
PROFILE_STATUSES = (STATUS_LOOKING, STATUS_OPEN_TO_OFFERS, STATUS_IN_TEAM)


@dataclass
class StudentProfile:
    """A student as seen by the listing surface."""

    id: str
    name: str = "Anonymous"
    major: str = "Undeclared"
    status: str = STATUS_LOOKING
    graduation_year: Optional[int] = None
    bio: Optional[str] = None
    snapshot: ProfileSnapshot = field(default_factory=ProfileSnapshot)

    @property
    def is_available(self) -> bool:
        """Whether the student can still be recruited into a team."""
        return self.status != STATUS_IN_TEAM

    def __repr__(self) -> str:
        return f"<StudentProfile {self.id} ({self.name})>"
