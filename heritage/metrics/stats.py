"""
Heritage statistics over a site collection: destruction counts, religious
sites, age and knowledge repositories.
"""

from typing import Iterable, Optional

from heritage.metrics.glow import site_age
from heritage.models import HeritageStats, Site, SiteStatus, SiteType

RELIGIOUS_TYPES = (SiteType.MOSQUE, SiteType.CHURCH)
ANCIENT_AGE = 1000


def heritage_stats(sites: Iterable[Site], reference_year: Optional[int] = None) -> HeritageStats:
    """Compute dashboard counts for a collection of sites."""
    sites = list(sites)

    def count(predicate) -> int:
        return sum(1 for site in sites if predicate(site))

    def is_destroyed(site: Site) -> bool:
        return site.status == SiteStatus.DESTROYED

    destroyed = count(is_destroyed)
    heavily_damaged = count(lambda s: s.status == SiteStatus.HEAVILY_DAMAGED)
    damaged = count(lambda s: s.status == SiteStatus.DAMAGED)

    religious = [s for s in sites if s.type in RELIGIOUS_TYPES]
    religious_destroyed = sum(1 for s in religious if is_destroyed(s))

    ages = [age for age in (site_age(s, reference_year) for s in sites) if age is not None]

    museums = count(lambda s: s.type == SiteType.MUSEUM)
    archaeological = count(lambda s: s.type == SiteType.ARCHAEOLOGICAL)

    return HeritageStats(
        total=len(sites),
        destroyed=destroyed,
        heavily_damaged=heavily_damaged,
        damaged=damaged,
        surviving=heavily_damaged + damaged,
        religious_sites=len(religious),
        religious_destroyed=religious_destroyed,
        religious_surviving=len(religious) - religious_destroyed,
        oldest_site_age=max(ages + [0]),
        ancient_sites=sum(1 for age in ages if age >= ANCIENT_AGE),
        museums=museums,
        museums_destroyed=count(lambda s: s.type == SiteType.MUSEUM and is_destroyed(s)),
        archaeological=archaeological,
        archaeological_surviving=count(
            lambda s: s.type == SiteType.ARCHAEOLOGICAL and not is_destroyed(s)
        ),
    )
