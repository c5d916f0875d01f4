"""Heritage metric calculations: glow, age colour, integrity and significance."""

from heritage.metrics.glow import (
    age_color_code,
    age_multiplier,
    glow_contribution,
    glow_reduction_percentage,
    site_age,
)
from heritage.metrics.integrity import (
    destroyed_value,
    heritage_integrity,
    total_heritage_value,
)
from heritage.metrics.significance import significance_score
from heritage.metrics.stats import heritage_stats

__all__ = [
    # Per-site
    "site_age",
    "age_multiplier",
    "glow_contribution",
    "glow_reduction_percentage",
    "age_color_code",
    "significance_score",
    # Aggregates
    "total_heritage_value",
    "destroyed_value",
    "heritage_integrity",
    "heritage_stats",
]
