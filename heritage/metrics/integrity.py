"""
Heritage value and integrity aggregates for stats dashboards and the timeline.
"""

from datetime import date
from typing import Iterable, Optional

from loguru import logger

from heritage.metrics.glow import glow_contribution
from heritage.models import DestroyedValue, Site
from heritage.normalizers.dates import parse_iso_date, round_half_up


def total_heritage_value(sites: Iterable[Site], reference_year: Optional[int] = None) -> int:
    """Sum of glow contributions over all sites (0 for no sites)."""
    return sum(glow_contribution(site, reference_year) for site in sites)


def destroyed_value(
    sites: Iterable[Site],
    as_of,
    reference_year: Optional[int] = None,
) -> DestroyedValue:
    """
    Calculate heritage value lost to sites destroyed on or before a date.

    Only the exact dateDestroyed counts here. A site known only by its survey
    date is not treated as destroyed.

    Args:
        sites: Heritage sites
        as_of: Timeline date (date, datetime or ISO string), inclusive
        reference_year: Year ages are measured from (defaults to settings)

    Returns:
        DestroyedValue with the summed glow and the number of sites
    """
    cutoff = parse_iso_date(as_of)
    if cutoff is None:
        return DestroyedValue(value=0, count=0)

    value = 0
    count = 0
    for site in sites:
        destroyed_on = parse_iso_date(site.date_destroyed)
        if destroyed_on is None or destroyed_on > cutoff:
            continue
        value += glow_contribution(site, reference_year)
        count += 1

    return DestroyedValue(value=value, count=count)


def heritage_integrity(
    sites: Iterable[Site],
    as_of,
    reference_year: Optional[int] = None,
) -> int:
    """
    Percentage of total heritage value still intact as of a date.

    100 means nothing destroyed, 0 means everything destroyed. An empty
    collection has nothing to destroy and reports 100.
    """
    sites = list(sites)
    total = total_heritage_value(sites, reference_year)
    if total == 0:
        return 100

    lost = destroyed_value(sites, as_of, reference_year)
    integrity = round_half_up((total - lost.value) / total * 100)
    logger.debug(
        f"Integrity as of {as_of}: {integrity}% "
        f"({lost.count} destroyed, {lost.value}/{total} value lost)"
    )
    return integrity
