"""
Data models for heritage site records and filter criteria.

Site records arrive with camelCase keys (yearBuilt, dateDestroyed, ...) and are
validated into immutable pydantic models. Python code may use the snake_case
field names directly.
"""

from datetime import date
from enum import Enum
from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SiteType(str, Enum):
    """Known site type tags."""

    MOSQUE = "mosque"
    CHURCH = "church"
    ARCHAEOLOGICAL = "archaeological"
    MUSEUM = "museum"
    HISTORIC_BUILDING = "historic-building"


class SiteStatus(str, Enum):
    """Known damage status tags."""

    DESTROYED = "destroyed"
    HEAVILY_DAMAGED = "heavily-damaged"
    DAMAGED = "damaged"


def tag_value(tag) -> str:
    """Return the plain string behind a type/status tag."""
    if isinstance(tag, Enum):
        return tag.value
    return tag


def _coerce_tag(enum_cls, value):
    # Unknown tags stay plain strings so they survive unconstrained filters
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


class Site(BaseModel):
    """A documented heritage site. Read-only input to every core operation."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    id: str
    name: str = ""
    name_arabic: Optional[str] = None
    type: Union[SiteType, str] = ""
    status: Union[SiteStatus, str] = ""
    year_built: str = ""

    # ISO date strings, parsed lazily so a malformed value never rejects a record
    date_destroyed: Optional[str] = None
    source_assessment_date: Optional[str] = None

    unesco_listed: Optional[bool] = None
    is_unique: Optional[bool] = None
    religious_significance: Optional[bool] = None
    community_gathering_place: Optional[bool] = None
    artifact_count: Optional[int] = Field(default=None, ge=0)
    historical_events: tuple[str, ...] = ()

    # Display-only fields
    description: Optional[str] = None
    coordinates: Optional[tuple[float, float]] = None

    @field_validator("type", mode="after")
    @classmethod
    def coerce_type(cls, v):
        return _coerce_tag(SiteType, v)

    @field_validator("status", mode="after")
    @classmethod
    def coerce_status(cls, v):
        return _coerce_tag(SiteStatus, v)

    @field_validator("date_destroyed", "source_assessment_date", mode="before")
    @classmethod
    def dates_as_text(cls, v):
        if isinstance(v, date):
            return v.isoformat()
        return v

    @field_validator("historical_events", mode="before")
    @classmethod
    def events_or_empty(cls, v):
        return () if v is None else v


class FilterState(BaseModel):
    """
    Active filter criteria.

    Every criterion is optional: an empty selection, a None bound or a blank
    search term places no constraint. The default instance is the identity
    filter.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    selected_types: tuple[str, ...] = ()
    selected_statuses: tuple[str, ...] = ()
    destruction_date_start: Optional[date] = None
    destruction_date_end: Optional[date] = None
    creation_year_start: Optional[int] = None
    creation_year_end: Optional[int] = None
    search_term: str = ""

    @field_validator("selected_types", "selected_statuses", mode="before")
    @classmethod
    def tags_as_text(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        return tuple(tag_value(tag) for tag in v)

    def is_empty(self) -> bool:
        """True when no criterion constrains the result."""
        return self.active_count() == 0

    def active_count(self) -> int:
        """Number of constrained criteria. A date or year range counts once."""
        active = [
            bool(self.selected_types),
            bool(self.selected_statuses),
            self.destruction_date_start is not None or self.destruction_date_end is not None,
            self.creation_year_start is not None or self.creation_year_end is not None,
            bool(self.search_term.strip()),
        ]
        return sum(active)

    def same_as(self, other: "FilterState") -> bool:
        """Compare criteria, ignoring selection order."""
        return (
            sorted(self.selected_types) == sorted(other.selected_types)
            and sorted(self.selected_statuses) == sorted(other.selected_statuses)
            and self.destruction_date_start == other.destruction_date_start
            and self.destruction_date_end == other.destruction_date_end
            and self.creation_year_start == other.creation_year_start
            and self.creation_year_end == other.creation_year_end
            and self.search_term == other.search_term
        )


class DestroyedValue(NamedTuple):
    """Glow value and number of sites destroyed as of a date."""

    value: int
    count: int


class YearRange(NamedTuple):
    start: Optional[int]
    end: Optional[int]


class DateRange(NamedTuple):
    start: date
    end: date


class HeritageStats(BaseModel):
    """Dashboard counts over a site collection."""

    total: int = 0
    destroyed: int = 0
    heavily_damaged: int = 0
    damaged: int = 0
    surviving: int = 0
    religious_sites: int = 0
    religious_destroyed: int = 0
    religious_surviving: int = 0
    oldest_site_age: int = 0
    ancient_sites: int = 0
    museums: int = 0
    museums_destroyed: int = 0
    archaeological: int = 0
    archaeological_surviving: int = 0
