"""
RecordStore - In-memory raw + active record sets.

Owned by whoever composes the pipeline (the API app, the CLI) and passed
explicitly to the filter, aggregate and export functions.
"""
from __future__ import annotations

from typing import Optional, Sequence

from sales_dashboard.config import FilterDefaults
from sales_dashboard.data.filters import active_filter_count, apply_filters
from sales_dashboard.data.schemas import FilterCriteria, Record
from sales_dashboard.logging_setup import get_logger

logger = get_logger(__name__)


class RecordStore:
    """Raw records (fixed per load) and the active filtered subset."""

    def __init__(self, defaults: Optional[FilterDefaults] = None) -> None:
        self.defaults = defaults or FilterDefaults()
        self.raw: tuple[Record, ...] = ()
        self.active: list[Record] = []
        self.criteria = FilterCriteria.from_defaults(self.defaults)
        self._loaded = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def load(self, records: Sequence[Record]) -> "RecordStore":
        """Replace the raw set and show everything."""
        self.raw = tuple(records)
        self.active = list(self.raw)
        self.criteria = FilterCriteria.from_defaults(self.defaults)
        self._loaded = True
        logger.info("Record store loaded: %d records", len(self.raw))
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def apply(self, criteria: FilterCriteria) -> list[Record]:
        """Filter raw into active. On ValidationError nothing changes."""
        filtered = apply_filters(self.raw, criteria)
        self.active = filtered
        self.criteria = criteria
        logger.info("Filters applied (%s): %d records", criteria.label, len(filtered))
        return filtered

    def reset(self) -> list[Record]:
        """Show every raw record again and restore the default criteria."""
        self.active = list(self.raw)
        self.criteria = FilterCriteria.from_defaults(self.defaults)
        logger.info("Filters reset: %d records", len(self.active))
        return self.active

    def active_filter_count(self) -> int:
        return active_filter_count(self.criteria, self.defaults)

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self.raw)

    def active_count(self) -> int:
        return len(self.active)

    def locations(self) -> list[str]:
        """Unique location names, sorted."""
        return sorted({r.location for r in self.raw if r.location})

    def categories(self) -> list[str]:
        """Unique category names, sorted."""
        return sorted({r.category for r in self.raw if r.category})

    def date_range(self) -> str:
        """Human-readable date range of the active set."""
        if not self.active:
            return "N/A"
        dates = [r.date for r in self.active]
        return f"{min(dates)} to {max(dates)}"
