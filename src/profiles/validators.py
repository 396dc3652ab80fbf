"""Pydantic validation models for the profiles YAML file."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.profiles.normalize import (
    DAYS_OF_WEEK,
    TIME_SLOTS,
    normalize_day,
    normalize_team_size,
    normalize_time_slot,
)
from src.profiles.source import INTEREST_STATUSES
from src.profiles.student import PROFILE_STATUSES, STATUS_LOOKING


class SkillEntry(BaseModel):
    """One skill in the shared catalog."""
    id: str = Field(min_length=1)
    name: str = Field(default="")
    category: str = Field(default="")

    @model_validator(mode="before")
    @classmethod
    def coerce_id(cls, data):
        """Allow numeric ids in YAML."""
        if isinstance(data, dict) and isinstance(data.get("id"), int):
            return {**data, "id": str(data["id"])}
        return data


class AvailabilityEntry(BaseModel):
    """A weekly time slot."""
    day_of_week: str
    time_slot: str

    @model_validator(mode="before")
    @classmethod
    def accept_time_of_day(cls, data):
        """Older exports used time_of_day for the slot column."""
        if isinstance(data, dict) and "time_slot" not in data and "time_of_day" in data:
            data = {**data, "time_slot": data["time_of_day"]}
        return data

    @field_validator("day_of_week")
    @classmethod
    def validate_day(cls, v):
        day = normalize_day(v)
        if day not in DAYS_OF_WEEK:
            raise ValueError(f"Unknown day of week: {v!r}")
        return day

    @field_validator("time_slot")
    @classmethod
    def validate_slot(cls, v):
        slot = normalize_time_slot(v)
        if slot not in TIME_SLOTS:
            raise ValueError(f"Unknown time slot: {v!r}")
        return slot


class ProfileEntry(BaseModel):
    """A student profile as written in the YAML file."""
    id: str = Field(min_length=1)
    name: Optional[str] = Field(default=None)
    major: Optional[str] = Field(default=None)
    status: str = Field(default=STATUS_LOOKING)
    graduation_year: Optional[int] = Field(default=None)
    bio: Optional[str] = Field(default=None)
    onboarding_completed: bool = Field(default=True)
    skills: list[str] = Field(default_factory=list)
    looking_for: list[str] = Field(default_factory=list)
    availability: list[AvailabilityEntry] = Field(default_factory=list)
    project_interests: list[str] = Field(default_factory=list)
    team_size_preference: Optional[int] = Field(default=None)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v) if isinstance(v, int) else v

    @field_validator("skills", "looking_for", mode="before")
    @classmethod
    def coerce_skill_ids(cls, v):
        """Skill references are ids; allow numeric ids."""
        if isinstance(v, list):
            return [str(item) for item in v if item is not None and str(item).strip()]
        return v

    @field_validator("project_interests", mode="before")
    @classmethod
    def filter_empty_strings(cls, v):
        """Remove empty strings from lists."""
        if isinstance(v, list):
            return [item.strip() for item in v if item and item.strip()]
        return v

    @field_validator("team_size_preference", mode="before")
    @classmethod
    def ignore_invalid_team_size(cls, v):
        return normalize_team_size(v)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        status = v.strip().lower()
        if status not in PROFILE_STATUSES:
            raise ValueError(f"Status must be one of {', '.join(PROFILE_STATUSES)}")
        return status


class InterestEntry(BaseModel):
    """An expression of interest from one student to another."""
    from_user: str = Field(min_length=1)
    to_user: str = Field(min_length=1)
    status: str = Field(default="pending")

    @field_validator("from_user", "to_user", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v) if isinstance(v, int) else v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        status = v.strip().lower()
        if status not in INTEREST_STATUSES:
            raise ValueError(f"Interest status must be one of {', '.join(INTEREST_STATUSES)}")
        return status


class ProfilesFile(BaseModel):
    """Complete profiles.yaml document."""
    skills: list[SkillEntry] = Field(default_factory=list)
    profiles: list[ProfileEntry] = Field(default_factory=list)
    interests: list[InterestEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_references(self):
        """Profile and skill ids are unique and every reference resolves."""
        profile_ids = set()
        for profile in self.profiles:
            if profile.id in profile_ids:
                raise ValueError(f"Duplicate profile id: {profile.id}")
            profile_ids.add(profile.id)

        skill_ids = set()
        for skill in self.skills:
            if skill.id in skill_ids:
                raise ValueError(f"Duplicate skill id: {skill.id}")
            skill_ids.add(skill.id)

        for profile in self.profiles:
            unknown = sorted(
                set(profile.skills + profile.looking_for) - skill_ids
            )
            if unknown:
                raise ValueError(
                    f"Profile {profile.id} references unknown skills: {', '.join(unknown)}"
                )

        for interest in self.interests:
            for user_id in (interest.from_user, interest.to_user):
                if user_id not in profile_ids:
                    raise ValueError(f"Interest references unknown profile: {user_id}")
        return self


def validate_profiles_file(data: dict) -> ProfilesFile:
    """Validate a profiles dictionary and return ProfilesFile.

    Args:
        data: Dictionary matching profiles.yaml structure

    Returns:
        Validated ProfilesFile instance

    Raises:
        ValidationError: If validation fails
    """
    return ProfilesFile(**data)
