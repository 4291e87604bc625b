import pytest

from sales_dashboard.config import FilterDefaults
from sales_dashboard.data.schemas import FilterCriteria
from sales_dashboard.data.store import RecordStore
from sales_dashboard.errors import ValidationError


def test_new_store_is_empty():
    store = RecordStore()
    assert not store.is_loaded
    assert store.row_count() == 0
    assert store.active == []
    assert store.date_range() == "N/A"


def test_load_copies_raw_into_active(records):
    store = RecordStore().load(records)
    assert store.is_loaded
    assert list(store.raw) == records
    assert store.active == records
    assert store.active is not records


def test_apply_replaces_active_but_not_raw(store, records):
    store.apply(FilterCriteria(location="LA"))
    assert store.active_count() == 2
    assert store.row_count() == len(records)
    assert store.criteria.location == "LA"


def test_validation_error_keeps_last_good_state(store):
    store.apply(FilterCriteria(location="NYC"))
    before = list(store.active)
    before_criteria = store.criteria

    with pytest.raises(ValidationError):
        store.apply(FilterCriteria(start_date="2024-02-01", end_date="2024-01-01"))

    assert store.active == before
    assert store.criteria == before_criteria


def test_reset_restores_everything(store, records):
    store.apply(FilterCriteria(start_date="2024-01-17", location="NYC"))
    store.reset()
    assert store.active == records
    assert store.criteria == FilterCriteria("2024-01-15", "2024-01-24", "all")
    assert store.active_filter_count() == 0


def test_reset_uses_configured_defaults(records):
    defaults = FilterDefaults(start_date="2023-12-01", end_date="2023-12-31", location="LA")
    store = RecordStore(defaults).load(records)
    store.apply(FilterCriteria(location="NYC"))
    store.reset()
    assert store.criteria == FilterCriteria("2023-12-01", "2023-12-31", "LA")
    assert store.active == records


def test_metadata(store):
    assert store.locations() == ["Chicago", "LA", "NYC"]
    assert store.categories() == ["Clothing", "Electronics", "Toys"]
    assert store.date_range() == "2024-01-15 to 2024-01-17"
