"""
Glow contribution calculations.

Each site contributes a "glow" proportional to its heritage weight. The weight
starts at a base value and every applicable factor multiplies it, so an
ancient, UNESCO-listed, unique archaeological site glows roughly 21x brighter
than a modern unlisted building.
"""

from typing import Optional

from heritage.config import (
    AGE_COLOR_BANDS,
    AGE_COLOR_MODERN,
    GLOW_AGE_MULTIPLIERS,
    GLOW_ARTIFACT_MULTIPLIER,
    GLOW_ARTIFACT_THRESHOLD,
    GLOW_BASE_WEIGHT,
    GLOW_COMMUNITY_MULTIPLIER,
    GLOW_EVENT_STEP,
    GLOW_REDUCTION_BY_STATUS,
    GLOW_RELIGIOUS_MULTIPLIER,
    GLOW_TYPE_MULTIPLIERS,
    GLOW_UNESCO_MULTIPLIER,
    GLOW_UNIQUE_MULTIPLIER,
    settings,
)
from heritage.models import Site, tag_value
from heritage.normalizers.dates import parse_year_built, round_half_up


def site_age(site: Site, reference_year: Optional[int] = None) -> Optional[int]:
    """Age of a site in years, or None when its construction date is unparseable."""
    year_built = parse_year_built(site.year_built)
    if year_built is None:
        return None
    if reference_year is None:
        reference_year = settings.reference_year
    return reference_year - year_built


def age_multiplier(age: Optional[int]) -> float:
    """Glow multiplier for an age. Unknown and modern ages keep the base weight."""
    if age is None:
        return 1
    for min_age, multiplier in GLOW_AGE_MULTIPLIERS:
        if age > min_age:
            return multiplier
    return 1


def glow_contribution(site: Site, reference_year: Optional[int] = None) -> int:
    """
    Calculate the heritage glow contribution of a site.

    Factors compound in this order: age, UNESCO listing, artifact count
    (strictly more than 100), uniqueness, type, religious significance,
    community gathering place, then +10% per historical event.

    Args:
        site: Heritage site
        reference_year: Year ages are measured from (defaults to settings)

    Returns:
        Rounded glow value (100 for a modern site with no modifiers)
    """
    weight = GLOW_BASE_WEIGHT

    age = site_age(site, reference_year)
    if age is not None:
        weight *= age_multiplier(age)

    if site.unesco_listed is True:
        weight *= GLOW_UNESCO_MULTIPLIER

    if site.artifact_count is not None and site.artifact_count > GLOW_ARTIFACT_THRESHOLD:
        weight *= GLOW_ARTIFACT_MULTIPLIER

    if site.is_unique is True:
        weight *= GLOW_UNIQUE_MULTIPLIER

    # mosque, church and historic-building use the base weight
    type_multiplier = GLOW_TYPE_MULTIPLIERS.get(tag_value(site.type))
    if type_multiplier is not None:
        weight *= type_multiplier

    if site.religious_significance is True:
        weight *= GLOW_RELIGIOUS_MULTIPLIER

    if site.community_gathering_place is True:
        weight *= GLOW_COMMUNITY_MULTIPLIER

    if site.historical_events:
        weight *= 1 + len(site.historical_events) * GLOW_EVENT_STEP

    return round_half_up(weight)


def glow_reduction_percentage(status) -> int:
    """Percentage of glow removed by a damage status (0 for unknown statuses)."""
    return GLOW_REDUCTION_BY_STATUS.get(tag_value(status), 0)


def age_color_code(site: Site, reference_year: Optional[int] = None) -> str:
    """
    Get the marker colour for a site based on its age.

    Gold for ancient (> 2000 years), bronze for medieval (> 500), silver for
    Ottoman/historic (> 200) and blue for modern or unknown ages.
    """
    age = site_age(site, reference_year)
    if age is None:
        return AGE_COLOR_MODERN

    for min_age, color in AGE_COLOR_BANDS:
        if age > min_age:
            return color
    return AGE_COLOR_MODERN
