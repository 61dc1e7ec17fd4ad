"""Application configuration settings."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Reader settings loaded from environment variables.

    Built once per process and never mutated; functions that need limits
    take a ``settings`` argument and fall back to :func:`get_settings`.
    """

    model_config = SettingsConfigDict(
        env_prefix="RSVP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # App
    app_name: str = "RSVP Core"
    debug: bool = False
    log_level: str = "INFO"
    # Rotating JSON log files are written here when set
    log_dir: Optional[Path] = None
    log_console: bool = True

    # Chunk size options
    chunk_min: int = Field(default=1, ge=1)
    chunk_max: int = Field(default=3, ge=1)
    chunk_default: int = Field(default=1, ge=1)

    # Text validation
    text_min_words: int = Field(default=3, ge=1)

    # WPM boundaries
    wpm_min: int = Field(default=100, ge=1)
    wpm_max: int = Field(default=1500, ge=1)
    wpm_default: int = Field(default=300, ge=1)

    # Peripheral context
    context_size_default: int = Field(default=8, ge=1)

    # Word length thresholds for timing adjustments
    word_length_short: int = 6
    word_length_medium: int = 8
    word_length_long: int = 12

    # Timing multipliers based on word length
    multiplier_medium: float = Field(default=1.1, gt=0)
    multiplier_long: float = Field(default=1.2, gt=0)
    multiplier_very_long: float = Field(default=1.4, gt=0)

    # Punctuation pause ratios
    full_stop_pause_ratio: float = Field(default=1.0, ge=0)
    partial_stop_pause_ratio: float = Field(default=0.5, ge=0)
    pause_duration_default_ms: int = Field(default=200, ge=0)

    # Warmup
    warmup_start_ratio: float = Field(default=0.5, gt=0, le=1)

    @model_validator(mode="after")
    def _check_ranges(self) -> "Settings":
        if not self.chunk_min <= self.chunk_default <= self.chunk_max:
            raise ValueError(
                "chunk sizes must satisfy chunk_min <= chunk_default <= chunk_max "
                f"(got {self.chunk_min}, {self.chunk_default}, {self.chunk_max})"
            )
        if not self.wpm_min <= self.wpm_default <= self.wpm_max:
            raise ValueError(
                "WPM must satisfy wpm_min <= wpm_default <= wpm_max "
                f"(got {self.wpm_min}, {self.wpm_default}, {self.wpm_max})"
            )
        if not self.word_length_short <= self.word_length_medium <= self.word_length_long:
            raise ValueError("word length thresholds must be non-decreasing")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
