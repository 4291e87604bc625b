import pytest

from sales_dashboard.config import FilterDefaults
from sales_dashboard.data.filters import active_filter_count, apply_filters
from sales_dashboard.data.schemas import FilterCriteria
from sales_dashboard.errors import ValidationError


def test_start_date_scenario(two_records):
    active = apply_filters(two_records, FilterCriteria(start_date="2024-01-16"))
    assert active == [two_records[1]]


def test_inverted_range_raises():
    with pytest.raises(ValidationError) as exc_info:
        apply_filters([], FilterCriteria(start_date="2024-02-01", end_date="2024-01-01"))
    assert exc_info.value.message == "Start date cannot be after end date"


def test_bounds_are_inclusive(records):
    active = apply_filters(records, FilterCriteria(start_date="2024-01-15", end_date="2024-01-16"))
    assert sorted({r.date for r in active}) == ["2024-01-15", "2024-01-16"]
    assert len(active) == 3


def test_same_start_and_end_is_valid(records):
    active = apply_filters(records, FilterCriteria(start_date="2024-01-17", end_date="2024-01-17"))
    assert [r.revenue for r in active] == [120.0, 30.25]


@pytest.mark.parametrize("location", [None, "", "all"])
def test_location_all_or_absent_keeps_everything(records, location):
    assert apply_filters(records, FilterCriteria(location=location)) == records


def test_location_is_exact_match(records):
    assert [r.location for r in apply_filters(records, FilterCriteria(location="LA"))] == ["LA", "LA"]
    assert apply_filters(records, FilterCriteria(location="la")) == []
    assert apply_filters(records, FilterCriteria(location="NY")) == []


def test_predicates_combine(records):
    active = apply_filters(records, FilterCriteria(start_date="2024-01-16", location="NYC"))
    assert [(r.date, r.category) for r in active] == [("2024-01-17", "Electronics"), ("2024-01-17", "Clothing")]


def test_filtering_is_idempotent(records):
    criteria = FilterCriteria(end_date="2024-01-16", location="LA")
    once = apply_filters(records, criteria)
    assert apply_filters(records, criteria) == once
    assert apply_filters(once, criteria) == once


def test_active_filter_count():
    defaults = FilterDefaults()
    assert active_filter_count(FilterCriteria.from_defaults(defaults), defaults) == 0
    assert active_filter_count(FilterCriteria("2024-01-15", "2024-01-24", None), defaults) == 0
    assert active_filter_count(FilterCriteria("2024-01-16", "2024-01-24", "all"), defaults) == 1
    assert active_filter_count(FilterCriteria(None, None, "NYC"), defaults) == 3
