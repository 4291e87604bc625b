"""
Row cleaning: required-field checks, date format validation, numeric coercion.
"""
from __future__ import annotations

import re
from typing import Any, Iterable, Optional

import pandas as pd

from sales_dashboard.config import CURRENCY_STRIP_RE, DATE_PATTERN, REQUIRED_FIELDS
from sales_dashboard.data.schemas import CleanReport, DroppedRow, Record
from sales_dashboard.logging_setup import get_logger

logger = get_logger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class _RowRejected(Exception):
    """Internal signal: the row fails validation. Never escapes this module."""


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------

def is_missing(value: Any) -> bool:
    """True for None, NaN/NA and falsy values ("" and 0 included)."""
    if value is None:
        return True
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return True
    return not value


def parse_revenue(value: Any) -> float:
    """Numbers pass through; text has "$" and "," stripped before parsing."""
    if isinstance(value, str):
        try:
            return float(CURRENCY_STRIP_RE.sub("", value))
        except ValueError:
            raise _RowRejected(f"Non-numeric revenue: {value!r}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _RowRejected(f"Non-numeric revenue: {value!r}")
    return float(value)


def parse_customers(value: Any) -> int:
    """Numbers are truncated to int; text is read up to its first non-digit."""
    if isinstance(value, str):
        m = _LEADING_INT_RE.match(value)
        if not m:
            raise _RowRejected(f"Non-numeric customers: {value!r}")
        return int(m.group(1))
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _RowRejected(f"Non-numeric customers: {value!r}")
    return int(value)


def _optional_label(value: Any) -> Optional[str]:
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return None
    return str(value)


# ---------------------------------------------------------------------------
# Row / batch cleaning
# ---------------------------------------------------------------------------

def clean_row(row: dict[str, Any]) -> Record:
    """Validate one parsed row and build a Record, or raise _RowRejected."""
    missing = [f for f in REQUIRED_FIELDS if is_missing(row.get(f))]
    if missing:
        raise _RowRejected(f"Skipping incomplete row (missing {', '.join(missing)})")

    date = str(row["date"])
    if not DATE_PATTERN.fullmatch(date):
        raise _RowRejected(f"Invalid date format: {date}")

    return Record(
        date=date,
        revenue=parse_revenue(row["revenue"]),
        customers=parse_customers(row["customers"]),
        category=_optional_label(row.get("category")),
        location=_optional_label(row.get("location")),
    )


def clean_rows(rows: Iterable[dict[str, Any]]) -> tuple[list[Record], CleanReport]:
    """Keep the valid rows as Records, in source order.

    Bad rows are excluded, logged at WARNING and listed in the returned report.
    """
    records: list[Record] = []
    report = CleanReport()
    for idx, row in enumerate(rows):
        try:
            records.append(clean_row(row))
        except _RowRejected as exc:
            reason = str(exc)
            logger.warning("%s: row %d %r", reason, idx, row)
            report.dropped.append(DroppedRow(index=idx, reason=reason, row=dict(row)))

    report.kept = len(records)
    logger.info("Cleaned %d rows: %d kept, %d dropped", report.total, report.kept, report.dropped_count)
    return records, report
