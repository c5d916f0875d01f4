"""
Data normalization utilities.

These modules turn the free-text and ISO date fields of site records into
values the metrics and filters can compare.
"""

from .dates import (
    effective_destruction_date,
    hijri_to_gregorian,
    parse_iso_date,
    parse_year_built,
    round_half_up,
)

__all__ = [
    'parse_year_built',
    'parse_iso_date',
    'effective_destruction_date',
    'hijri_to_gregorian',
    'round_half_up',
]
