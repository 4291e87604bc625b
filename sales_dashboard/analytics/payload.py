"""
Page payload - stats, chart series and filter state in one JSON-ready dict.
"""
from __future__ import annotations

from sales_dashboard.data.store import RecordStore
from sales_dashboard.analytics.charts import chart_payloads
from sales_dashboard.analytics.common import sanitize_for_json
from sales_dashboard.analytics.dashboard import summary_stats


def dashboard_payload(store: RecordStore) -> dict:
    """Everything the page needs to redraw: stats, chart series, filters."""
    active = store.active
    return sanitize_for_json({
        "stats": summary_stats(active),
        "charts": chart_payloads(active),
        "filters": store.criteria.to_dict(),
        "active_filters": store.active_filter_count(),
        "date_range": store.date_range(),
        "records": {"raw": store.row_count(), "active": store.active_count()},
    })
