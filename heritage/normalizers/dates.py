"""
Date parsing and normalization utilities.

Handles the free-text "year built" field of site records, which mixes explicit
years, ranges, approximations, Islamic calendar years and century notation,
and the ISO destruction/assessment dates.
"""

import math
import re
from datetime import date, datetime
from typing import Optional

from heritage.config import HIJRI_EPOCH_YEAR, HIJRI_YEAR_RATIO

_ERA = r"(BCE|BC|CE|AD)"

# "800-900 CE", "1400 - 1500", "1200-1100 BC", "800-900BCE"
RANGE_PATTERN = re.compile(rf"\b(\d+)\s*-\s*(\d+)(?:\s*{_ERA}\b|\b)", re.IGNORECASE)

# "circa 1200", "ca. 800 BCE", "~ 1500 CE", "circa1200"
APPROXIMATION_PATTERN = re.compile(r"^(?:circa|ca\.|~)\s*", re.IGNORECASE)

ISLAMIC_PATTERN = re.compile(r"\b(\d+)\s*AH\b", re.IGNORECASE)
BCE_PATTERN = re.compile(r"\b(\d+)\s*(?:BCE|BC)\b", re.IGNORECASE)
CE_PATTERN = re.compile(r"\b(\d+)\s*(?:CE|AD)\b", re.IGNORECASE)
BARE_YEAR_PATTERN = re.compile(r"\b(\d{3,4})\b")
CENTURY_PATTERN = re.compile(r"\b(\d+)(?:st|nd|rd|th)\s+century\b", re.IGNORECASE)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def hijri_to_gregorian(year_ah: int) -> int:
    """Approximate the Gregorian year of a Hijri (AH) year."""
    return round_half_up(HIJRI_EPOCH_YEAR + year_ah * HIJRI_YEAR_RATIO)


def parse_year_built(value) -> Optional[int]:
    """
    Parse a free-text construction date into a signed year (negative = BCE).

    Formats are tried in a fixed order and the first match wins:

    1. Range "N-M [era]": floor of the midpoint, negated for BCE/BC
    2. Leading "circa", "ca." or "~": stripped, remainder re-parsed
    3. "N AH": converted from the Islamic calendar (approximate)
    4. "N BCE" / "N BC"
    5. "N CE" / "N AD"
    6. First standalone 3-4 digit year, assumed CE
    7. "Nth century": the century midpoint

    Args:
        value: Raw yearBuilt text

    Returns:
        Year as integer, or None when nothing matches or input is not text
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    match = RANGE_PATTERN.search(text)
    if match:
        start, end, era = match.groups()
        midpoint = (int(start) + int(end)) // 2
        if era and era.upper() in ("BCE", "BC"):
            return -midpoint
        return midpoint

    match = APPROXIMATION_PATTERN.match(text)
    if match:
        return parse_year_built(text[match.end():])

    match = ISLAMIC_PATTERN.search(text)
    if match:
        return hijri_to_gregorian(int(match.group(1)))

    match = BCE_PATTERN.search(text)
    if match:
        return -int(match.group(1))

    match = CE_PATTERN.search(text)
    if match:
        return int(match.group(1))

    match = BARE_YEAR_PATTERN.search(text)
    if match:
        return int(match.group(1))

    match = CENTURY_PATTERN.search(text)
    if match:
        century = int(match.group(1))
        return (century - 1) * 100 + 50

    return None


def parse_iso_date(value) -> Optional[date]:
    """Parse an ISO date string (time part ignored) into a date.

    Accepts date and datetime objects as-is. Returns None for anything that
    is not a valid calendar date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        # Handle YYYY-MM-DD with or without a trailing time part
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def effective_destruction_date(site) -> Optional[date]:
    """
    Date a site is placed at on the destruction timeline.

    Uses dateDestroyed when known, else the source assessment (survey) date.
    """
    destroyed = parse_iso_date(site.date_destroyed)
    if destroyed is not None:
        return destroyed
    return parse_iso_date(site.source_assessment_date)
