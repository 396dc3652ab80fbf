"""SQLAlchemy models for Team Radar."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, relationship


def utcnow() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def generate_uuid() -> str:
    """Generate a UUID string."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


profile_skills = Table(
    "profile_skills",
    Base.metadata,
    Column("profile_id", String, ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", String, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)

profile_looking_for = Table(
    "profile_looking_for",
    Base.metadata,
    Column("profile_id", String, ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", String, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)


class Skill(Base):
    """Catalog skill (reference data)."""

    __tablename__ = "skills"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False, unique=True)
    category = Column(String, nullable=False, default="Other")

    def __repr__(self) -> str:
        return f"<Skill {self.name} ({self.category})>"


class Profile(Base):
    """A student's team-formation profile."""

    __tablename__ = "profiles"

    id = Column(String, primary_key=True, default=generate_uuid)
    email = Column(String, unique=True, nullable=True)
    name = Column(String, nullable=True)
    major = Column(String, nullable=True)
    graduation_year = Column(Integer, nullable=True)
    bio = Column(Text, nullable=True)

    # looking, open_to_offers, in_team
    status = Column(String, default="looking", nullable=False)
    team_size_preference = Column(Integer, nullable=True)
    onboarding_completed = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    skills = relationship("Skill", secondary=profile_skills, lazy="selectin")
    looking_for = relationship("Skill", secondary=profile_looking_for, lazy="selectin")
    availability = relationship(
        "Availability",
        back_populates="profile",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    project_interests = relationship(
        "ProjectInterest",
        back_populates="profile",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_profiles_status", "status"),
        Index("ix_profiles_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Profile {self.id} ({self.name})>"


class Availability(Base):
    """A weekly time slot a student is free."""

    __tablename__ = "availability"

    id = Column(String, primary_key=True, default=generate_uuid)
    profile_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    day_of_week = Column(String, nullable=False)  # monday..sunday
    time_of_day = Column(String, nullable=False)  # morning, afternoon, evening

    profile = relationship("Profile", back_populates="availability")

    __table_args__ = (
        UniqueConstraint("profile_id", "day_of_week", "time_of_day", name="uq_availability_slot"),
    )

    def __repr__(self) -> str:
        return f"<Availability {self.day_of_week} {self.time_of_day}>"


class ProjectInterest(Base):
    """A free-text project interest tag."""

    __tablename__ = "project_interests"

    id = Column(String, primary_key=True, default=generate_uuid)
    profile_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    interest = Column(String, nullable=False)

    profile = relationship("Profile", back_populates="project_interests")

    def __repr__(self) -> str:
        return f"<ProjectInterest {self.interest}>"


class InterestRequest(Base):
    """One student's expression of interest in teaming up with another."""

    __tablename__ = "interest_requests"

    id = Column(String, primary_key=True, default=generate_uuid)
    from_user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    to_user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    status = Column(String, default="pending", nullable=False)  # pending, accepted, declined
    message = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("ix_interest_requests_to_user_status", "to_user_id", "status"),
    )

    def __repr__(self) -> str:
        return f"<InterestRequest {self.from_user_id} -> {self.to_user_id} ({self.status})>"
