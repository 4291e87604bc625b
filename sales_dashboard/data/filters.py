"""
Filter engine: date range + location predicates over the raw records.
"""
from __future__ import annotations

from typing import Sequence

from sales_dashboard.config import FilterDefaults
from sales_dashboard.data.schemas import FilterCriteria, Record
from sales_dashboard.errors import ValidationError


def validate_criteria(criteria: FilterCriteria) -> None:
    """ISO dates are fixed-width, so string comparison is chronological."""
    if criteria.start_date and criteria.end_date and criteria.start_date > criteria.end_date:
        raise ValidationError("Start date cannot be after end date")


def matches(record: Record, criteria: FilterCriteria) -> bool:
    if criteria.start_date and record.date < criteria.start_date:
        return False
    if criteria.end_date and record.date > criteria.end_date:
        return False
    if criteria.location_active and record.location != criteria.location:
        return False
    return True


def apply_filters(raw: Sequence[Record], criteria: FilterCriteria) -> list[Record]:
    """Return the raw records that satisfy every active criterion, in order."""
    validate_criteria(criteria)
    return [r for r in raw if matches(r, criteria)]


def active_filter_count(criteria: FilterCriteria, defaults: FilterDefaults) -> int:
    """How many criteria differ from the configured defaults."""
    count = 0
    if criteria.start_date != defaults.start_date:
        count += 1
    if criteria.end_date != defaults.end_date:
        count += 1
    if (criteria.location or defaults.location) != defaults.location:
        count += 1
    return count
