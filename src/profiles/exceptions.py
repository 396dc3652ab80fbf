"""Profile loading exceptions for Team Radar."""


class ProfileError(Exception):
    """Base exception for profile lookup and loading errors."""

    pass


class ProfileNotFoundError(ProfileError):
    """Raised when a profile id does not exist in the profile source."""

    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__(f"Profile not found: {profile_id}")


class ProfileFileError(ProfileError):
    """Raised when a profiles YAML file cannot be read or fails validation."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid profiles file {path}: {reason}")
