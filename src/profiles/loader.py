"""Load student profiles from a YAML file."""
import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from src.matching.compatibility import Skill
from src.profiles.exceptions import ProfileFileError
from src.profiles.normalize import build_snapshot
from src.profiles.source import ACTIVE_INTEREST_STATUSES
from src.profiles.student import StudentProfile
from src.profiles.validators import ProfileEntry, ProfilesFile, validate_profiles_file

logger = logging.getLogger(__name__)


class ProfileDirectory:
    """In-memory ProfileSource backed by a validated profiles file.

    File order stands in for creation order: later entries are newer.
    """

    def __init__(self, document: ProfilesFile):
        self.skills = {
            entry.id: Skill(id=entry.id, name=entry.name, category=entry.category)
            for entry in document.skills
        }
        self._entries = {entry.id: entry for entry in document.profiles}
        self.profiles = {
            entry.id: self._to_student(entry) for entry in document.profiles
        }
        self.interests = list(document.interests)

    def _to_student(self, entry: ProfileEntry) -> StudentProfile:
        snapshot = build_snapshot(
            skills=[self.skills[skill_id] for skill_id in entry.skills],
            looking_for=[self.skills[skill_id] for skill_id in entry.looking_for],
            availability=[(a.day_of_week, a.time_slot) for a in entry.availability],
            project_interests=entry.project_interests,
            team_size_preference=entry.team_size_preference,
        )
        return StudentProfile(
            id=entry.id,
            name=entry.name or "Anonymous",
            major=entry.major or "Undeclared",
            status=entry.status,
            graduation_year=entry.graduation_year,
            bio=entry.bio,
            snapshot=snapshot,
        )

    def get_profile(self, profile_id: str) -> Optional[StudentProfile]:
        return self.profiles.get(profile_id)

    def list_candidates(self, viewer_id: str) -> list[StudentProfile]:
        candidates = []
        for profile_id in reversed(list(self.profiles)):
            profile = self.profiles[profile_id]
            if profile_id == viewer_id or not profile.is_available:
                continue
            if not self._entries[profile_id].onboarding_completed:
                continue
            candidates.append(profile)
        return candidates

    def interested_in(self, viewer_id: str) -> set[str]:
        return {
            interest.from_user
            for interest in self.interests
            if interest.to_user == viewer_id and interest.status in ACTIVE_INTEREST_STATUSES
        }


def load_profile_directory(path: Union[str, Path]) -> ProfileDirectory:
    """
    Load and validate a profiles YAML file.

    Args:
        path: Path to profiles.yaml

    Returns:
        ProfileDirectory over the file's profiles and interests

    Raises:
        ProfileFileError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ProfileFileError(str(path), f"cannot read file ({e.strerror})") from e
    except yaml.YAMLError as e:
        raise ProfileFileError(str(path), f"invalid YAML ({e})") from e

    if not isinstance(data, dict):
        raise ProfileFileError(str(path), "top level must be a mapping")

    try:
        document = validate_profiles_file(data)
    except ValidationError as e:
        raise ProfileFileError(str(path), str(e)) from e

    directory = ProfileDirectory(document)
    logger.info(
        "Loaded %d profiles and %d skills from %s",
        len(directory.profiles),
        len(directory.skills),
        path,
    )
    return directory
