"""Centralized configuration for little-search-engine using Pydantic Settings."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Corpus sources
    docs_file: Path = Field(default=Path("docs.txt"), description="Corpus manifest listing document files")
    noise_words_file: Path = Field(default=Path("noisewords.txt"), description="Noise words, one per entry")

    # Query settings
    max_results: int = Field(default=5, ge=1, description="Maximum documents returned per query")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return normalized
