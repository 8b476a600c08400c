"""
Configuration module for the Turkish Spell Checker Service.

This module defines the settings for the spell checker, including the
morphology configuration, suggestion limits and HTTP serving options.
"""

from __future__ import annotations

from enum import Enum

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file from repository root, regardless of current working directory
load_dotenv(find_dotenv(".env"))


class Environment(str, Enum):
    """Defines application environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Configuration settings for the Turkish Spell Checker Service.

    These settings can be overridden via environment variables prefixed with
    TURKISH_SPELLCHECKER_.
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",  # Read from global ENVIRONMENT var
        description="Runtime environment for the service",
    )
    SERVICE_NAME: str = "turkish-spellchecker"
    VERSION: str = "1.0.0"
    HTTP_PORT: int = 8090
    HOST: str = "0.0.0.0"

    # Morphology configuration
    INFORMAL_ANALYSIS_ENABLED: bool = Field(
        default=True,
        description="Build the morphology with informal analysis so colloquial forms can be "
        "converted to their formal spelling",
    )

    # Suggestion limits
    MAX_SUGGESTIONS: int = Field(
        default=9, ge=1, description="Maximum number of suggestions returned for a word"
    )
    SPLIT_MIN_LENGTH: int = Field(
        default=3, description="Shortest word considered for two-word split suggestions"
    )
    SPLIT_MAX_LENGTH: int = Field(
        default=25, description="Longest word considered for two-word split suggestions"
    )
    MAX_SPLIT_SUGGESTIONS: int = Field(
        default=3, ge=0, description="Maximum number of split suggestions kept after ranking"
    )

    # Batch request limits
    MAX_WORDS_PER_REQUEST: int = Field(
        default=500, ge=1, description="Maximum number of words accepted by /v1/spellcheck"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="TURKISH_SPELLCHECKER_",
    )


# Create a single instance for the application to use
settings = Settings()
