"""Database persistence layer."""
from .database import get_session, init_db
from .models import Availability, Base, InterestRequest, Profile, ProjectInterest, Skill
from .profile_store import ProfileStore

__all__ = [
    "Base",
    "Skill",
    "Profile",
    "Availability",
    "ProjectInterest",
    "InterestRequest",
    "ProfileStore",
    "init_db",
    "get_session",
]
