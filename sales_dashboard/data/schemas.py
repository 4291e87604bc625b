"""
Record and filter schemas for the sales pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Optional

from sales_dashboard.config import ALL_LOCATIONS, FilterDefaults


@dataclass(frozen=True)
class Record:
    """One validated transaction row. Built only by the cleaner."""
    date: str                       # YYYY-MM-DD
    revenue: float
    customers: int
    category: Optional[str] = None
    location: Optional[str] = None

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]


@dataclass(frozen=True)
class FilterCriteria:
    """Optional date range + location constraints applied to the raw records."""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    location: Optional[str] = None

    @classmethod
    def from_defaults(cls, defaults: FilterDefaults) -> "FilterCriteria":
        return cls(
            start_date=defaults.start_date,
            end_date=defaults.end_date,
            location=defaults.location,
        )

    @property
    def location_active(self) -> bool:
        return bool(self.location) and self.location != ALL_LOCATIONS

    @property
    def label(self) -> str:
        """Human-readable label for the criteria."""
        s = self.start_date or "?"
        e = self.end_date or "?"
        where = self.location if self.location_active else "all locations"
        return f"{s} to {e}, {where}"

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "start_date": self.start_date,
            "end_date": self.end_date,
            "location": self.location,
        }


@dataclass(frozen=True)
class DroppedRow:
    index: int
    reason: str
    row: dict[str, Any]


@dataclass
class CleanReport:
    """Side channel listing which parsed rows the cleaner kept and dropped."""
    kept: int = 0
    dropped: list[DroppedRow] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return len(self.dropped)

    @property
    def total(self) -> int:
        return self.kept + self.dropped_count
