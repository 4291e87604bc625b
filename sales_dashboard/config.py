"""
Sales Dashboard - Configuration: paths, constants, filter defaults.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths - override with SALES_DASHBOARD_DATA_FILE env var
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_DATA_FILE = PROJECT_ROOT / "data" / "sample-data.csv"

# ---------------------------------------------------------------------------
# Row validation
# ---------------------------------------------------------------------------
REQUIRED_FIELDS = ("date", "revenue", "customers")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
CURRENCY_STRIP_RE = re.compile(r"[\$,]")

# ---------------------------------------------------------------------------
# Grouping / filtering labels
# ---------------------------------------------------------------------------
ALL_LOCATIONS = "all"
UNKNOWN_LABEL = "Unknown"

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------
EXPORT_FILENAME_PREFIX = "sales-data"
EXPORT_MEDIA_TYPE = "text/csv"

# ---------------------------------------------------------------------------
# User notices (seconds before the page clears them)
# ---------------------------------------------------------------------------
ERROR_TTL_SECONDS = 5
SUCCESS_TTL_SECONDS = 3

LOAD_ERROR_MESSAGE = "Failed to load dashboard data. Please refresh the page."


@dataclass(frozen=True)
class FilterDefaults:
    """Filter values the dashboard starts with and returns to on reset."""
    start_date: str = "2024-01-15"
    end_date: str = "2024-01-24"
    location: str = ALL_LOCATIONS


@dataclass(frozen=True)
class Settings:
    data_file: Path = DEFAULT_DATA_FILE
    defaults: FilterDefaults = field(default_factory=FilterDefaults)

    @classmethod
    def from_env(cls) -> "Settings":
        data_file = os.environ.get("SALES_DASHBOARD_DATA_FILE")
        return cls(data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE)
