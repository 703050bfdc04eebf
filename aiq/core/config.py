"""Configuration management for AIQ Engine."""

from functools import lru_cache
from typing import Literal

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
    AIQ_ENV: str = Field(default="dev", description="Environment: dev, test, prod")

    # Questionnaire
    TOTAL_QUESTIONS: int = Field(
        default=5, ge=1, description="Number of questions in one assessment"
    )

    # Result store
    RESULT_STORE_BACKEND: Literal["memory", "file"] = Field(
        default="memory", description="Where the most recent result is kept"
    )
    RESULT_STORE_PATH: str = Field(
        default="aiq_results.json", description="JSON file used by the file backend"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If environment variables hold invalid values
    """
    return Settings()
