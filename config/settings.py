"""Application settings using Pydantic."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///team_radar.db",
        description="SQLAlchemy database URL",
    )

    # Profiles file used by `rank --source file`
    profiles_file: Optional[Path] = Field(
        default=None,
        description="Path to a profiles YAML file (defaults to config/profiles.yaml)",
    )

    # Ranking
    min_score: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Hide candidates scoring below this total",
    )
    top_n: int = Field(
        default=20,
        ge=1,
        description="How many candidates to list",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional rotating log file path",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def profiles_path(self) -> Path:
        """Path to the profiles YAML file."""
        return self.profiles_file or self.config_dir / "profiles.yaml"

    @property
    def project_root(self) -> Path:
        """Project root directory."""
        return self.config_dir.parent


# Global settings instance
settings = Settings()
