import pytest

from sales_dashboard.analytics.charts import chart_payloads, format_date
from sales_dashboard.analytics.payload import dashboard_payload
from sales_dashboard.analytics.dashboard import (
    customers_by_location,
    revenue_by_category,
    revenue_by_date,
    summary_stats,
)
from sales_dashboard.data.schemas import FilterCriteria, Record


def test_revenue_by_date_sorted_ascending(records):
    assert revenue_by_date(records) == [
        {"date": "2024-01-15", "revenue": pytest.approx(99.75)},
        {"date": "2024-01-16", "revenue": pytest.approx(200.0)},
        {"date": "2024-01-17", "revenue": pytest.approx(150.25)},
    ]


def test_category_and_location_keep_first_seen_order(records):
    assert [p["category"] for p in revenue_by_category(records)] == ["Electronics", "Clothing", "Toys"]
    assert revenue_by_category(records)[1]["revenue"] == pytest.approx(110.75)

    assert customers_by_location(records) == [
        {"location": "NYC", "customers": 5},
        {"location": "LA", "customers": 8},
        {"location": "Chicago", "customers": 1},
    ]


def test_missing_labels_group_as_unknown():
    recs = [Record("2024-01-15", 10.0, 1), Record("2024-01-16", 5.0, 2, "A", "X")]
    assert [p["category"] for p in revenue_by_category(recs)] == ["Unknown", "A"]
    assert [p["location"] for p in customers_by_location(recs)] == ["Unknown", "X"]


def test_summary_stats(records):
    stats = summary_stats(records)
    assert stats["total_revenue"] == pytest.approx(450.0)
    assert stats["total_customers"] == 14
    assert stats["total_transactions"] == 5
    assert stats["avg_transaction"] == pytest.approx(90.0)


def test_empty_set_does_not_divide_by_zero():
    assert summary_stats([]) == {
        "total_revenue": 0.0,
        "total_customers": 0,
        "total_transactions": 0,
        "avg_transaction": 0.0,
    }
    assert revenue_by_date([]) == []
    assert revenue_by_category([]) == []
    assert customers_by_location([]) == []


def test_daily_revenue_sums_to_total(records):
    for subset in (records, records[:1], records[1:4], []):
        total = sum(p["revenue"] for p in revenue_by_date(subset))
        assert total == pytest.approx(summary_stats(subset)["total_revenue"])


def test_chart_payloads(records):
    charts = chart_payloads(records)
    assert charts["revenue"]["labels"] == ["Jan 15", "Jan 16", "Jan 17"]
    assert charts["revenue"]["data"] == [99.75, 200.0, 150.25]
    assert charts["category"]["labels"] == ["Electronics", "Clothing", "Toys"]
    assert charts["customer"]["data"] == [5, 8, 1]
    assert charts["customer"]["percentages"] == [35.7, 57.1, 7.1]


def test_chart_payloads_empty():
    charts = chart_payloads([])
    assert charts["customer"] == {"type": "pie", "label": "Customers", "labels": [], "data": [], "percentages": []}


def test_format_date():
    assert format_date("2024-01-05") == "Jan 5"
    assert format_date("2024-13-45") == "2024-13-45"


def test_dashboard_payload_follows_active_set(store):
    store.apply(FilterCriteria(location="LA"))
    payload = dashboard_payload(store)

    assert payload["stats"]["total_transactions"] == 2
    assert payload["stats"]["total_revenue"] == pytest.approx(280.5)
    assert payload["filters"] == {"start_date": None, "end_date": None, "location": "LA"}
    assert payload["active_filters"] == 3
    assert payload["records"] == {"raw": 5, "active": 2}
    assert payload["charts"]["customer"]["labels"] == ["LA"]
