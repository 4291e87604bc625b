"""Shared fixtures: small record sets, CSV files on disk, and an API client.

Each API test gets its own app instance pointed at a CSV under ``tmp_path`` so
filter state never leaks between tests.
"""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from sales_dashboard.config import Settings
from sales_dashboard.data.schemas import Record
from sales_dashboard.data.store import RecordStore
from sales_dashboard.main import create_app


SAMPLE_CSV = textwrap.dedent(
    """\
    date,revenue,customers,category,location
    2024-01-15,100.00,2,Electronics,NYC
    2024-01-20,50.00,1,Clothing,LA
    2024-01-20,"$1,200.50",10,Electronics,"New York, NY"
    2024-01-22,75.25,3,Clothing,NYC
    bad-date,10.00,1,Clothing,NYC
    2024-01-23,,4,Clothing,LA
    """
)


@pytest.fixture
def two_records() -> list[Record]:
    return [
        Record(date="2024-01-15", revenue=100.0, customers=2, location="NYC"),
        Record(date="2024-01-20", revenue=50.0, customers=1, location="LA"),
    ]


@pytest.fixture
def records() -> list[Record]:
    return [
        Record("2024-01-17", 120.0, 4, "Electronics", "NYC"),
        Record("2024-01-15", 80.5, 2, "Clothing", "LA"),
        Record("2024-01-17", 30.25, 1, "Clothing", "NYC"),
        Record("2024-01-16", 200.0, 6, "Toys", "LA"),
        Record("2024-01-15", 19.25, 1, "Electronics", "Chicago"),
    ]


@pytest.fixture
def store(records) -> RecordStore:
    return RecordStore().load(records)


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    path = tmp_path / "sample-data.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def client(sample_csv: Path):
    app = create_app(Settings(data_file=sample_csv))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def empty_client(tmp_path: Path):
    """Client whose data file does not exist, so the startup load fails."""
    app = create_app(Settings(data_file=tmp_path / "missing.csv"))
    with TestClient(app) as c:
        yield c
