"""
CSV export of the active records.
"""
from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, Optional, Sequence

from sales_dashboard.config import EXPORT_FILENAME_PREFIX
from sales_dashboard.data.schemas import Record
from sales_dashboard.errors import ExportError
from sales_dashboard.logging_setup import get_logger

logger = get_logger(__name__)

_NEEDS_QUOTING = (",", '"', "\n")
_CENTS = Decimal("0.01")


# ---------------------------------------------------------------------------
# Cell formatting
# ---------------------------------------------------------------------------

def format_number(value: float | int) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_money(value: float | int) -> str:
    """Two decimals, ties rounded away from zero on the exact binary value."""
    d = Decimal(value)
    if not d.is_finite():
        return str(value)
    return str(d.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_cell(header: str, value: Any) -> str:
    """Render one field value as CSV cell text."""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if header == "revenue":
            return format_money(value)
        return format_number(value)
    if isinstance(value, str):
        if any(ch in value for ch in _NEEDS_QUOTING):
            return '"' + value.replace('"', '""') + '"'
        return value
    return str(value)


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

def to_delimited_text(records: Sequence[Record]) -> str:
    """Header row plus one line per record, joined by newlines.

    Raises ExportError when there are no records.
    """
    if not records:
        raise ExportError("No data to export")

    headers = Record.field_names()
    lines = [",".join(headers)]
    for record in records:
        lines.append(",".join(format_cell(h, getattr(record, h)) for h in headers))
    return "\n".join(lines)


def generate_filename(now: Optional[datetime] = None) -> str:
    """sales-data-YYYYMMDD-HHMM.csv for the given (or current) local time."""
    now = now or datetime.now()
    return f"{EXPORT_FILENAME_PREFIX}-{now:%Y%m%d-%H%M}.csv"


def write_csv(records: Sequence[Record], out_dir: Path, now: Optional[datetime] = None) -> Path:
    """Write the export next to other downloads and return its path."""
    text = to_delimited_text(records)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / generate_filename(now)
    out_path.write_text(text, encoding="utf-8")
    logger.info("CSV exported: %d records -> %s", len(records), out_path)
    return out_path
