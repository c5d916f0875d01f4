"""
Heritage tracker core.

Parses historical construction dates, computes heritage metrics (glow,
age colour, integrity, significance) and filters site collections.
"""

from loguru import logger

from heritage.filters import filter_sites
from heritage.metrics import (
    age_color_code,
    destroyed_value,
    glow_contribution,
    heritage_integrity,
    significance_score,
    total_heritage_value,
)
from heritage.models import FilterState, Site, SiteStatus, SiteType
from heritage.normalizers import parse_year_built

__version__ = "0.1.0"

# Silent as a library until setup_logging() is called
logger.disable("heritage")

__all__ = [
    "Site",
    "SiteType",
    "SiteStatus",
    "FilterState",
    "parse_year_built",
    "glow_contribution",
    "age_color_code",
    "significance_score",
    "total_heritage_value",
    "destroyed_value",
    "heritage_integrity",
    "filter_sites",
]
