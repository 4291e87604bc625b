"""
Dashboard analytics - grouped series and summary stats over the active records.

Every function recomputes from the records it is given; nothing is cached.
"""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from sales_dashboard.config import UNKNOWN_LABEL
from sales_dashboard.data.schemas import Record
from sales_dashboard.analytics.common import records_frame, safe_divide


# ---------------------------------------------------------------------------
# Grouped series
# ---------------------------------------------------------------------------

def _grouped_sum(df: pd.DataFrame, key: str, value: str, *, sort: bool) -> pd.Series:
    labels = df[key].fillna(UNKNOWN_LABEL)
    return df[value].groupby(labels, sort=sort).sum()


def revenue_by_date(records: Sequence[Record]) -> list[dict]:
    """Daily revenue, ascending by date."""
    if not records:
        return []
    grouped = _grouped_sum(records_frame(records), "date", "revenue", sort=True)
    return [{"date": str(d), "revenue": float(v)} for d, v in grouped.items()]


def revenue_by_category(records: Sequence[Record]) -> list[dict]:
    """Revenue per category, in order of first appearance."""
    if not records:
        return []
    grouped = _grouped_sum(records_frame(records), "category", "revenue", sort=False)
    return [{"category": str(c), "revenue": float(v)} for c, v in grouped.items()]


def customers_by_location(records: Sequence[Record]) -> list[dict]:
    """Customer count per location, in order of first appearance."""
    if not records:
        return []
    grouped = _grouped_sum(records_frame(records), "location", "customers", sort=False)
    return [{"location": str(loc), "customers": int(v)} for loc, v in grouped.items()]


# ---------------------------------------------------------------------------
# Scalar stats
# ---------------------------------------------------------------------------

def summary_stats(records: Sequence[Record]) -> dict:
    if not records:
        return {
            "total_revenue": 0.0,
            "total_customers": 0,
            "total_transactions": 0,
            "avg_transaction": 0.0,
        }
    df = records_frame(records)
    total_revenue = float(df["revenue"].sum())
    total_transactions = len(df)
    return {
        "total_revenue": total_revenue,
        "total_customers": int(df["customers"].sum()),
        "total_transactions": total_transactions,
        "avg_transaction": safe_divide(total_revenue, total_transactions),
    }
