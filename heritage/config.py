"""
Configuration management for the heritage tracker core.

Uses pydantic-settings for type-safe configuration with environment variable support.
"""

from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HeritageSettings(BaseSettings):
    """Settings for metric calculation and filtering."""

    model_config = SettingsConfigDict(
        env_prefix="HERITAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Anchor year for every age computation. Fixed rather than taken from the
    # clock so glow and colour bands do not drift between runs.
    reference_year: int = 2024

    # Fallback start of the destruction date range when no site has a date
    conflict_start_date: date = Field(default=date(2023, 10, 7))

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names from the environment."""
        return str(v).upper()


@lru_cache()
def get_settings() -> HeritageSettings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return HeritageSettings()


# Convenience handle for quick access
settings = get_settings()


# =============================================================================
# Formula constants
# =============================================================================

GLOW_BASE_WEIGHT = 100

# (minimum age exclusive, multiplier), checked top to bottom
GLOW_AGE_MULTIPLIERS = [
    (2000, 3),    # Ancient (Bronze Age, Roman, Byzantine)
    (1000, 2),    # Medieval (Islamic Golden Age)
    (200, 1.5),   # Ottoman/Historic
]

# "library" is named in the formula notes but never weighted
GLOW_TYPE_MULTIPLIERS = {
    "archaeological": 1.8,
    "museum": 1.6,
}

GLOW_UNESCO_MULTIPLIER = 2
GLOW_ARTIFACT_THRESHOLD = 100
GLOW_ARTIFACT_MULTIPLIER = 1.5
GLOW_UNIQUE_MULTIPLIER = 2
GLOW_RELIGIOUS_MULTIPLIER = 1.3
GLOW_COMMUNITY_MULTIPLIER = 1.2
GLOW_EVENT_STEP = 0.1

# Marker colours by age. Bands differ from GLOW_AGE_MULTIPLIERS on purpose.
AGE_COLOR_ANCIENT = "#FFD700"    # Gold, > 2000 years
AGE_COLOR_MEDIEVAL = "#CD7F32"   # Bronze, 500-2000 years
AGE_COLOR_HISTORIC = "#C0C0C0"   # Silver, 200-500 years
AGE_COLOR_MODERN = "#4A90E2"     # Blue, < 200 years or unknown

AGE_COLOR_BANDS = [
    (2000, AGE_COLOR_ANCIENT),
    (500, AGE_COLOR_MEDIEVAL),
    (200, AGE_COLOR_HISTORIC),
]

# Share of glow removed by damage status (percent)
GLOW_REDUCTION_BY_STATUS = {
    "destroyed": 100,
    "heavily-damaged": 50,
    "damaged": 25,
}

# Additive significance weights
SIGNIFICANCE_BASE = 1.0
SIGNIFICANCE_UNESCO = 2
SIGNIFICANCE_UNIQUE = 3
SIGNIFICANCE_RELIGIOUS = 1
SIGNIFICANCE_COMMUNITY = 1
SIGNIFICANCE_PER_EVENT = 0.5

# Hijri to Gregorian approximation: 622 + AH * 0.97
HIJRI_EPOCH_YEAR = 622
HIJRI_YEAR_RATIO = 0.97
