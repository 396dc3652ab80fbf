"""Student profiles: normalization, sources and YAML loading."""
from .exceptions import ProfileError, ProfileFileError, ProfileNotFoundError
from .loader import ProfileDirectory, load_profile_directory
from .normalize import build_snapshot
from .source import ProfileSource
from .student import StudentProfile

__all__ = [
    "ProfileError",
    "ProfileFileError",
    "ProfileNotFoundError",
    "ProfileDirectory",
    "load_profile_directory",
    "build_snapshot",
    "ProfileSource",
    "StudentProfile",
]
