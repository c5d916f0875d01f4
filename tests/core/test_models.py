# SPDX-License-Identifier: MIT
"""Tests for site and filter state models."""

from datetime import date

import pytest
from pydantic import ValidationError

from heritage.models import FilterState, Site, SiteStatus, SiteType


class TestSite:
    def test_camel_case_record(self, sample_site_records):
        site = Site.model_validate(sample_site_records[1])
        assert site.year_built == "7th century"
        assert site.name_arabic == "موقع من العصور الوسطى"
        assert site.date_destroyed == "2023-12-01"

    def test_snake_case_fields(self):
        site = Site(id="s1", name="Great Omari Mosque", type="mosque", status="destroyed", year_built="7th century")
        assert site.type is SiteType.MOSQUE
        assert site.status is SiteStatus.DESTROYED

    def test_unknown_tags_stay_strings(self):
        site = Site(id="s1", type="bathhouse", status="under-assessment")
        assert site.type == "bathhouse"
        assert not isinstance(site.type, SiteType)
        assert site.status == "under-assessment"

    def test_optional_fields_default_to_absent(self):
        site = Site(id="s1")
        assert site.unesco_listed is None
        assert site.artifact_count is None
        assert site.historical_events == ()
        assert site.date_destroyed is None

    def test_null_events_become_empty(self):
        assert Site.model_validate({"id": "s1", "historicalEvents": None}).historical_events == ()

    def test_date_objects_stored_as_iso_text(self):
        site = Site(id="s1", date_destroyed=date(2023, 10, 15))
        assert site.date_destroyed == "2023-10-15"

    def test_negative_artifact_count_rejected(self):
        with pytest.raises(ValidationError):
            Site(id="s1", artifact_count=-1)

    def test_sites_are_immutable(self):
        site = Site(id="s1")
        with pytest.raises(ValidationError):
            site.name = "changed"


class TestFilterState:
    def test_default_is_empty(self):
        state = FilterState()
        assert state.is_empty()
        assert state.active_count() == 0

    def test_blank_search_is_inactive(self):
        assert FilterState(search_term="   ").is_empty()

    def test_active_count(self):
        state = FilterState(
            selected_types=["mosque"],
            destruction_date_start=date(2023, 10, 7),
            destruction_date_end=date(2024, 1, 1),
            creation_year_end=1000,
        )
        assert state.active_count() == 3
        assert not state.is_empty()

    def test_enum_selections_stored_as_text(self):
        state = FilterState(selected_types=[SiteType.CHURCH], selected_statuses="destroyed")
        assert state.selected_types == ("church",)
        assert state.selected_statuses == ("destroyed",)

    def test_same_as_ignores_selection_order(self):
        a = FilterState(selected_types=["mosque", "church"], search_term="gaza")
        b = FilterState(selected_types=["church", "mosque"], search_term="gaza")
        assert a.same_as(b)
        assert not a.same_as(FilterState(selected_types=["mosque"], search_term="gaza"))
