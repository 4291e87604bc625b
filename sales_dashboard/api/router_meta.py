"""
Meta endpoints: health, locations, categories, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from sales_dashboard.config import Settings
from sales_dashboard.data.loader import load_records
from sales_dashboard.data.store import RecordStore
from sales_dashboard.errors import LoadError
from sales_dashboard.api.dependencies import get_settings, get_store_or_empty
from sales_dashboard.api.response_models import (
    CategoriesResponse, HealthResponse, LocationsResponse, error_notice, success_notice,
)

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
async def health(store: RecordStore = Depends(get_store_or_empty)):
    return HealthResponse(
        status="ok",
        loaded=store.is_loaded,
        rows=store.row_count(),
        active_rows=store.active_count(),
        locations=len(store.locations()),
    )


@router.get("/locations", response_model=LocationsResponse)
async def list_locations(store: RecordStore = Depends(get_store_or_empty)):
    return LocationsResponse(locations=store.locations())


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories(store: RecordStore = Depends(get_store_or_empty)):
    return CategoriesResponse(categories=store.categories())


@router.post("/reload")
async def reload_data(
    store: RecordStore = Depends(get_store_or_empty),
    settings: Settings = Depends(get_settings),
):
    """Re-read the data file. On failure the current records stay in place."""
    try:
        records, report = await load_records(settings.data_file)
    except LoadError as exc:
        raise HTTPException(503, detail=error_notice(exc.message))

    store.load(records)
    return {
        "status": "reloaded",
        "rows": store.row_count(),
        "dropped": report.dropped_count,
        "notice": success_notice(f"Loaded {store.row_count()} records"),
    }
