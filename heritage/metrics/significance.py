"""
Site significance score for marker sizing.

Unlike the glow contribution, every factor here adds to the score.
"""

from typing import Optional

from heritage.config import (
    SIGNIFICANCE_BASE,
    SIGNIFICANCE_COMMUNITY,
    SIGNIFICANCE_PER_EVENT,
    SIGNIFICANCE_RELIGIOUS,
    SIGNIFICANCE_UNESCO,
    SIGNIFICANCE_UNIQUE,
)
from heritage.metrics.glow import site_age
from heritage.models import Site


def significance_score(site: Site, reference_year: Optional[int] = None) -> float:
    """Get the significance score of a site. Higher score = larger marker."""
    score = SIGNIFICANCE_BASE

    age = site_age(site, reference_year)
    if age is not None:
        score += age / 1000  # +1 per millennium

    if site.unesco_listed:
        score += SIGNIFICANCE_UNESCO
    if site.artifact_count:
        score += site.artifact_count / 100
    if site.is_unique:
        score += SIGNIFICANCE_UNIQUE
    if site.religious_significance:
        score += SIGNIFICANCE_RELIGIOUS
    if site.community_gathering_place:
        score += SIGNIFICANCE_COMMUNITY
    score += len(site.historical_events) * SIGNIFICANCE_PER_EVENT

    return score
