"""
Chart series for the three dashboard charts (line, bar, pie).

Only labels and values are produced here; styling belongs to the page.
"""
from __future__ import annotations

import datetime as dt
from typing import Any, Sequence

from sales_dashboard.data.schemas import Record
from sales_dashboard.analytics.common import pct_of_total
from sales_dashboard.analytics.dashboard import (
    customers_by_location,
    revenue_by_category,
    revenue_by_date,
)


def format_date(date_str: str) -> str:
    """'2024-01-15' -> 'Jan 15'. Unparseable strings are returned as-is."""
    try:
        d = dt.date.fromisoformat(date_str)
    except ValueError:
        return date_str
    return f"{d:%b} {d.day}"


def revenue_chart(records: Sequence[Record]) -> dict[str, Any]:
    series = revenue_by_date(records)
    return {
        "type": "line",
        "label": "Daily Revenue",
        "labels": [format_date(p["date"]) for p in series],
        "data": [round(p["revenue"], 2) for p in series],
    }


def category_chart(records: Sequence[Record]) -> dict[str, Any]:
    series = revenue_by_category(records)
    return {
        "type": "bar",
        "label": "Revenue by Category",
        "labels": [p["category"] for p in series],
        "data": [round(p["revenue"], 2) for p in series],
    }


def customer_chart(records: Sequence[Record]) -> dict[str, Any]:
    series = customers_by_location(records)
    total = sum(p["customers"] for p in series)
    return {
        "type": "pie",
        "label": "Customers",
        "labels": [p["location"] for p in series],
        "data": [p["customers"] for p in series],
        "percentages": [round(pct_of_total(p["customers"], total), 1) for p in series],
    }


def chart_payloads(records: Sequence[Record]) -> dict[str, dict[str, Any]]:
    return {
        "revenue": revenue_chart(records),
        "category": category_chart(records),
        "customer": customer_chart(records),
    }
