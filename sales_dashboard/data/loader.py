"""
CSV reading (pandas) and the async load entry point.
"""
from __future__ import annotations

import asyncio
import io
from pathlib import Path
from typing import Any

import pandas as pd

from sales_dashboard.config import LOAD_ERROR_MESSAGE, REQUIRED_FIELDS
from sales_dashboard.data.normalize import clean_rows
from sales_dashboard.data.schemas import CleanReport, Record
from sales_dashboard.errors import LoadError
from sales_dashboard.logging_setup import get_logger

logger = get_logger(__name__)

_READ_ERRORS = (
    OSError,
    UnicodeDecodeError,
    pd.errors.ParserError,
    pd.errors.EmptyDataError,
)


# ---------------------------------------------------------------------------
# DataFrame -> rows
# ---------------------------------------------------------------------------

def frame_to_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Header-named dicts with native Python values and None for empty cells."""
    df = df.rename(columns=lambda c: str(c).strip())
    missing = [c for c in REQUIRED_FIELDS if c not in df.columns]
    if missing:
        logger.warning("CSV header lacks required column(s): %s", ", ".join(missing))
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def _skip_bad_line(fields: list[str]) -> None:
    """Drop a line with more fields than the header instead of failing the file."""
    logger.warning("Skipping malformed CSV line (%d fields): %s", len(fields), ",".join(fields))


def _read_csv(source, **kwargs) -> pd.DataFrame:
    # Only empty cells are missing; "NA", "None", "null" etc. stay as text.
    return pd.read_csv(
        source,
        skip_blank_lines=True,
        keep_default_na=False,
        na_values=[""],
        on_bad_lines=_skip_bad_line,
        engine="python",
        **kwargs,
    )


def read_rows(path: Path) -> list[dict[str, Any]]:
    """Read a UTF-8 CSV file into loosely-typed row dicts."""
    try:
        df = _read_csv(path, encoding="utf-8")
    except _READ_ERRORS as exc:
        logger.error("Data loading error for %s: %s", path, exc)
        raise LoadError(LOAD_ERROR_MESSAGE) from exc
    return frame_to_rows(df)


def parse_csv_text(text: str) -> list[dict[str, Any]]:
    """Same as read_rows, for CSV content already held in memory."""
    try:
        df = _read_csv(io.StringIO(text))
    except _READ_ERRORS as exc:
        logger.error("CSV parsing error: %s", exc)
        raise LoadError("Failed to parse CSV data") from exc
    return frame_to_rows(df)


# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------

async def load_records(path: Path) -> tuple[list[Record], CleanReport]:
    """Read and clean the data file without blocking the event loop.

    Raises LoadError when the file cannot be read or parsed.
    """
    logger.info("Loading sales data from %s", path)
    rows = await asyncio.to_thread(read_rows, path)
    records, report = clean_rows(rows)
    logger.info("Data loaded successfully: %d records", len(records))
    return records, report
