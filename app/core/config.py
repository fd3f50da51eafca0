"""Configuration management for the KB Scoring Engine."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    KB_SCORING_ENV: str = Field(default="dev", description="Environment: dev, staging, prod")

    # Scoring defaults
    KB_DEFAULT_VERTICAL: str = Field(
        default="general", description="Vertical used when the caller does not pass one"
    )
    KB_SCORING_VERSION: str = Field(
        default="kb_score_v2", description="Schema version stamped on every scoring result"
    )

    # Status summary thresholds
    KB_MIN_PRODUCTION_READY: int = Field(
        default=70, ge=0, le=100, description="Minimum total score to call a KB production ready"
    )
    KB_MIN_PROMPT_QUALITY: int = Field(
        default=50, ge=0, le=100, description="Minimum total score to generate quality prompts"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()
