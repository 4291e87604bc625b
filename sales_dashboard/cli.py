#!/usr/bin/env python3
"""
Sales Dashboard CLI - summaries, CSV export, and the API server.

USAGE:
  python -m sales_dashboard.cli summary                                  # All records
  python -m sales_dashboard.cli summary --start 2024-01-16 --location NYC
  python -m sales_dashboard.cli summary --file data/other.csv

  python -m sales_dashboard.cli export                                   # Writes sales-data-YYYYMMDD-HHMM.csv
  python -m sales_dashboard.cli export --end 2024-01-20 --output ./exports

  python -m sales_dashboard.cli serve                                    # Start API server
  python -m sales_dashboard.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path

from sales_dashboard.config import Settings
from sales_dashboard.data.loader import load_records
from sales_dashboard.data.schemas import FilterCriteria
from sales_dashboard.data.store import RecordStore
from sales_dashboard.errors import DashboardError
from sales_dashboard.logging_setup import configure_logging
from sales_dashboard.analytics.dashboard import (
    customers_by_location,
    revenue_by_category,
    revenue_by_date,
    summary_stats,
)
from sales_dashboard.export import write_csv


def _build_criteria(args) -> FilterCriteria | None:
    """Build FilterCriteria from CLI args, or None when no filter was given."""
    start = getattr(args, "start", None)
    end = getattr(args, "end", None)
    location = getattr(args, "location", None)
    if start is None and end is None and location is None:
        return None
    return FilterCriteria(start_date=start, end_date=end, location=location)


def _load_store(args) -> RecordStore:
    settings = Settings.from_env()
    path = Path(args.file) if getattr(args, "file", None) else settings.data_file
    records, report = asyncio.run(load_records(path))
    if report.dropped_count:
        print(f"  Skipped {report.dropped_count} invalid row(s) of {report.total}")

    store = RecordStore(settings.defaults).load(records)
    criteria = _build_criteria(args)
    if criteria is not None:
        store.apply(criteria)
    return store


def cmd_summary(args):
    """Print stats and the three chart series for the filtered records."""
    store = _load_store(args)
    active = store.active

    print("\n" + "=" * 60)
    print("  SALES DASHBOARD - SUMMARY")
    print("=" * 60)
    print(f"  Records: {store.active_count():,} of {store.row_count():,}   ({store.date_range()})")

    s = summary_stats(active)
    print(f"\n  Total revenue:      ${s['total_revenue']:>12,.2f}")
    print(f"  Total customers:    {s['total_customers']:>13,}")
    print(f"  Avg transaction:    ${s['avg_transaction']:>12,.2f}")
    print(f"  Transactions:       {s['total_transactions']:>13,}")

    print("\n  REVENUE BY DATE")
    for p in revenue_by_date(active):
        print(f"    {p['date']:<14}${p['revenue']:>12,.2f}")

    print("\n  REVENUE BY CATEGORY")
    for p in revenue_by_category(active):
        print(f"    {p['category'][:20]:<22}${p['revenue']:>12,.2f}")

    print("\n  CUSTOMERS BY LOCATION")
    for p in customers_by_location(active):
        print(f"    {p['location'][:20]:<22}{p['customers']:>13,}")
    print("=" * 60 + "\n")


def cmd_export(args):
    """Write the filtered records to a timestamped CSV file."""
    store = _load_store(args)
    out_path = write_csv(store.active, Path(args.output))
    print(f"  Exported {store.active_count()} records successfully -> {out_path}")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Sales Dashboard API on port {args.port}...")
    uvicorn.run("sales_dashboard.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _add_filter_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--file", help="CSV file (default: SALES_DASHBOARD_DATA_FILE or data/sample-data.csv)")
    p.add_argument("--start", help="Start date YYYY-MM-DD")
    p.add_argument("--end", help="End date YYYY-MM-DD")
    p.add_argument("--location", help="Location name, or 'all'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sales Dashboard - CSV sales stats, filters and export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    summary_parser = subparsers.add_parser("summary", help="Print stats and chart series")
    _add_filter_args(summary_parser)
    summary_parser.set_defaults(func=cmd_summary)

    export_parser = subparsers.add_parser("export", help="Export filtered records to CSV")
    _add_filter_args(export_parser)
    export_parser.add_argument("--output", default=".", help="Output directory (default: current dir)")
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.log_level)
    try:
        args.func(args)
    except DashboardError as exc:
        print(f"  Error: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
