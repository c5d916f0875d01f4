"""
Site filter pipeline.

Four independent stages run in a fixed order, each on the previous stage's
output: type/status, destruction date range, creation year range, then text
search. No stage reorders sites, so the default FilterState returns the input
unchanged.
"""

from datetime import date
from typing import Iterable, Optional, Sequence

from loguru import logger

from heritage.config import settings
from heritage.models import DateRange, FilterState, Site, YearRange, tag_value
from heritage.normalizers.dates import (
    effective_destruction_date,
    parse_iso_date,
    parse_year_built,
)


def filter_by_type_and_status(
    sites: Iterable[Site],
    selected_types: Sequence = (),
    selected_statuses: Sequence = (),
) -> list[Site]:
    """Keep sites matching the selected types and statuses.

    An empty selection places no constraint on that axis.
    """
    types = {tag_value(t) for t in selected_types}
    statuses = {tag_value(s) for s in selected_statuses}

    result = []
    for site in sites:
        if types and tag_value(site.type) not in types:
            continue
        if statuses and tag_value(site.status) not in statuses:
            continue
        result.append(site)
    return result


def filter_by_destruction_date(
    sites: Iterable[Site],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[Site]:
    """
    Keep sites whose effective destruction date lies within [start, end].

    The effective date falls back to the survey date when dateDestroyed is
    unknown. Once a bound is set, sites with neither date are dropped.
    """
    start = parse_iso_date(start)
    end = parse_iso_date(end)
    if start is None and end is None:
        return list(sites)

    result = []
    for site in sites:
        when = effective_destruction_date(site)
        if when is None:
            continue
        if start is not None and when < start:
            continue
        if end is not None and when > end:
            continue
        result.append(site)
    return result


def filter_by_creation_year(
    sites: Iterable[Site],
    start: Optional[int] = None,
    end: Optional[int] = None,
) -> list[Site]:
    """Keep sites built within [start, end] (negative years are BCE).

    Sites with an unparseable construction date are always kept.
    """
    if start is None and end is None:
        return list(sites)

    result = []
    for site in sites:
        year = parse_year_built(site.year_built)
        if year is not None:
            if start is not None and year < start:
                continue
            if end is not None and year > end:
                continue
        result.append(site)
    return result


def filter_by_search(sites: Iterable[Site], search_term: Optional[str] = None) -> list[Site]:
    """
    Keep sites whose name contains the search term.

    English names match case-insensitively. Arabic names have no case and
    match exactly.
    """
    term = (search_term or "").strip()
    if not term:
        return list(sites)

    term_lower = term.lower()
    return [
        site
        for site in sites
        if term_lower in site.name.lower()
        or (site.name_arabic is not None and term in site.name_arabic)
    ]


def filter_sites(sites: Iterable[Site], filter_state: Optional[FilterState] = None) -> list[Site]:
    """
    Apply the full filter pipeline.

    Args:
        sites: All sites, in display order
        filter_state: Active criteria (None means no filtering)

    Returns:
        Matching sites, in their original relative order
    """
    sites = list(sites)
    if filter_state is None:
        return sites

    total = len(sites)
    sites = filter_by_type_and_status(
        sites, filter_state.selected_types, filter_state.selected_statuses
    )
    logger.debug(f"Type/status filter: {len(sites)}/{total} sites")

    sites = filter_by_destruction_date(
        sites, filter_state.destruction_date_start, filter_state.destruction_date_end
    )
    logger.debug(f"Destruction date filter: {len(sites)}/{total} sites")

    sites = filter_by_creation_year(
        sites, filter_state.creation_year_start, filter_state.creation_year_end
    )
    logger.debug(f"Creation year filter: {len(sites)}/{total} sites")

    sites = filter_by_search(sites, filter_state.search_term)
    logger.debug(f"Search filter: {len(sites)}/{total} sites")

    return sites


def filter_by_date(sites: Iterable[Site], selected: Optional[date] = None) -> list[Site]:
    """Keep sites destroyed on or before a timeline date.

    Sites without a destruction date are kept. No date means no filtering.
    """
    cutoff = parse_iso_date(selected)
    if cutoff is None:
        return list(sites)

    result = []
    for site in sites:
        destroyed_on = parse_iso_date(site.date_destroyed)
        if destroyed_on is None or destroyed_on <= cutoff:
            result.append(site)
    return result


def default_year_range(sites: Iterable[Site]) -> YearRange:
    """Earliest and latest parseable construction years (None when there are none)."""
    years = [year for year in (parse_year_built(s.year_built) for s in sites) if year is not None]
    if not years:
        return YearRange(start=None, end=None)
    return YearRange(start=min(years), end=max(years))


def default_date_range(sites: Iterable[Site], today: Optional[date] = None) -> DateRange:
    """
    Earliest and latest destruction dates across sites.

    Falls back to the conflict start date through today when no site has a
    destruction date.
    """
    dates = [d for d in (parse_iso_date(s.date_destroyed) for s in sites) if d is not None]
    if not dates:
        return DateRange(
            start=settings.conflict_start_date,
            end=today or date.today(),
        )
    return DateRange(start=min(dates), end=max(dates))
