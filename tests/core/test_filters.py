# SPDX-License-Identifier: MIT
"""Tests for the site filter pipeline."""

from datetime import date

import pytest

from heritage.filters import (
    default_date_range,
    default_year_range,
    filter_by_creation_year,
    filter_by_date,
    filter_by_destruction_date,
    filter_by_search,
    filter_by_type_and_status,
    filter_sites,
)
from heritage.models import FilterState, SiteStatus, SiteType


def ids(sites):
    return [site.id for site in sites]


class TestTypeAndStatus:
    def test_no_selection_keeps_all(self, sample_sites):
        assert filter_by_type_and_status(sample_sites, [], []) == sample_sites

    def test_by_type(self, sample_sites):
        assert ids(filter_by_type_and_status(sample_sites, ["mosque"], [])) == ["medieval-site"]

    def test_by_status(self, sample_sites):
        assert ids(filter_by_type_and_status(sample_sites, [], ["destroyed"])) == ["ancient-site"]

    def test_by_type_and_status(self, sample_sites):
        result = filter_by_type_and_status(sample_sites, ["mosque"], ["heavily-damaged"])
        assert ids(result) == ["medieval-site"]

    def test_enum_members_select_like_strings(self, sample_sites):
        result = filter_by_type_and_status(sample_sites, [SiteType.MUSEUM], [SiteStatus.DAMAGED])
        assert ids(result) == ["modern-site"]

    def test_unknown_tags_pass_unconstrained_axes(self, make_site):
        site = make_site(type="bathhouse", status="under-assessment")
        assert filter_by_type_and_status([site], [], []) == [site]
        assert filter_by_type_and_status([site], ["bathhouse"], []) == [site]
        assert filter_by_type_and_status([site], ["mosque"], []) == []


class TestDestructionDate:
    def test_no_bounds_keeps_all(self, sample_sites, make_site):
        undated = make_site(id="undated")
        sites = sample_sites + [undated]
        assert filter_by_destruction_date(sites, None, None) == sites

    def test_start_bound(self, sample_sites):
        result = filter_by_destruction_date(sample_sites, date(2023, 12, 1), None)
        assert ids(result) == ["medieval-site", "modern-site"]

    def test_end_bound(self, sample_sites):
        result = filter_by_destruction_date(sample_sites, None, date(2023, 12, 31))
        assert ids(result) == ["ancient-site", "medieval-site"]

    def test_range(self, sample_sites):
        result = filter_by_destruction_date(sample_sites, date(2023, 11, 1), date(2023, 12, 31))
        assert ids(result) == ["medieval-site"]

    def test_bounds_are_inclusive(self, sample_sites):
        result = filter_by_destruction_date(sample_sites, date(2023, 12, 1), date(2023, 12, 1))
        assert ids(result) == ["medieval-site"]

    def test_falls_back_to_assessment_date(self, make_site):
        surveyed = make_site(id="surveyed", sourceAssessmentDate="2024-05-01")
        result = filter_by_destruction_date([surveyed], date(2024, 1, 1), None)
        assert result == [surveyed]

    def test_undated_sites_excluded_once_bounded(self, make_site):
        undated = make_site(id="undated")
        assert filter_by_destruction_date([undated], date(2023, 1, 1), None) == []


class TestCreationYear:
    def test_no_bounds_keeps_all(self, sample_sites):
        assert filter_by_creation_year(sample_sites, None, None) == sample_sites

    def test_start_year_bce(self, sample_sites):
        assert len(filter_by_creation_year(sample_sites, -1000, None)) == 3
        assert ids(filter_by_creation_year(sample_sites, -500, None)) == ["medieval-site", "modern-site"]

    def test_end_year(self, sample_sites):
        assert ids(filter_by_creation_year(sample_sites, None, 1000)) == ["ancient-site", "medieval-site"]

    def test_century_midpoint(self, sample_sites):
        assert ids(filter_by_creation_year(sample_sites, 600, 700)) == ["medieval-site"]

    def test_modern_range(self, sample_sites):
        assert ids(filter_by_creation_year(sample_sites, 1900, 2000)) == ["modern-site"]

    @pytest.mark.parametrize("bounds", [(-5000, -4000), (1900, None), (None, -3000), (0, 0)])
    def test_unparseable_years_always_pass(self, make_site, bounds):
        unknown = make_site(id="unknown", yearBuilt="Ottoman era")
        assert filter_by_creation_year([unknown], *bounds) == [unknown]


class TestSearch:
    def test_blank_term_keeps_all(self, sample_sites):
        assert filter_by_search(sample_sites, "") == sample_sites
        assert filter_by_search(sample_sites, "   ") == sample_sites
        assert filter_by_search(sample_sites, None) == sample_sites

    def test_case_insensitive_name_match(self, sample_sites):
        assert ids(filter_by_search(sample_sites, "MEDIEVAL")) == ["medieval-site"]
        assert ids(filter_by_search(sample_sites, "site")) == ids(sample_sites)

    def test_arabic_name_match(self, sample_sites):
        assert ids(filter_by_search(sample_sites, "الوسطى")) == ["medieval-site"]

    def test_surrounding_whitespace_ignored(self, sample_sites):
        assert ids(filter_by_search(sample_sites, "  modern ")) == ["modern-site"]

    def test_no_match(self, sample_sites):
        assert filter_by_search(sample_sites, "cathedral") == []


class TestPipeline:
    def test_default_state_is_identity(self, sample_sites):
        result = filter_sites(sample_sites, FilterState())
        assert result == sample_sites
        assert all(a is b for a, b in zip(result, sample_sites))

    def test_no_state_is_identity(self, sample_sites):
        assert filter_sites(sample_sites) == sample_sites

    def test_does_not_reorder(self, sample_sites):
        reversed_sites = list(reversed(sample_sites))
        assert filter_sites(reversed_sites, FilterState(search_term="site")) == reversed_sites

    def test_type_and_status(self, sample_sites):
        state = FilterState(selected_types=["mosque"], selected_statuses=["heavily-damaged"])
        assert ids(filter_sites(sample_sites, state)) == ["medieval-site"]

    def test_stages_combine(self, sample_sites):
        state = FilterState(
            destruction_date_start=date(2023, 10, 1),
            destruction_date_end=date(2023, 12, 31),
            creation_year_start=-1000,
            creation_year_end=1000,
            search_term="medieval",
        )
        assert ids(filter_sites(sample_sites, state)) == ["medieval-site"]

    def test_accepts_camel_case_state(self, sample_sites):
        state = FilterState.model_validate({"selectedTypes": ["museum"], "creationYearStart": 1900})
        assert ids(filter_sites(sample_sites, state)) == ["modern-site"]


class TestTimelineDate:
    def test_no_date_keeps_all(self, sample_sites):
        assert filter_by_date(sample_sites, None) == sample_sites

    def test_on_or_before(self, sample_sites, make_site):
        undated = make_site(id="undated")
        result = filter_by_date(sample_sites + [undated], date(2023, 12, 1))
        assert ids(result) == ["ancient-site", "medieval-site", "undated"]


class TestDefaultRanges:
    def test_year_range(self, sample_sites):
        assert default_year_range(sample_sites) == (-800, 1950)

    def test_year_range_without_parseable_years(self, make_site):
        assert default_year_range([make_site()]) == (None, None)

    def test_date_range(self, sample_sites):
        assert default_date_range(sample_sites) == (date(2023, 10, 15), date(2024, 1, 15))

    def test_date_range_fallback(self, make_site):
        result = default_date_range([make_site()], today=date(2024, 6, 1))
        assert result == (date(2023, 10, 7), date(2024, 6, 1))
