"""
Dashboard endpoints - page payload, apply filters, reset filters.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from sales_dashboard.data.store import RecordStore
from sales_dashboard.errors import ValidationError
from sales_dashboard.analytics.payload import dashboard_payload
from sales_dashboard.api.dependencies import get_store
from sales_dashboard.api.response_models import FilterRequest, error_notice, success_notice

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard")
async def dashboard(store: RecordStore = Depends(get_store)):
    """Summary stats and chart series for the active records."""
    return dashboard_payload(store)


@router.post("/filters")
async def apply_filters(req: FilterRequest, store: RecordStore = Depends(get_store)):
    """Filter the raw records by date range and location."""
    try:
        filtered = store.apply(req.to_criteria())
    except ValidationError as exc:
        raise HTTPException(400, detail=error_notice(exc.message))

    payload = dashboard_payload(store)
    if store.active_filter_count() > 0:
        payload["notice"] = success_notice(f"Filters applied: {len(filtered)} records found")
    return payload


@router.post("/filters/reset")
async def reset_filters(store: RecordStore = Depends(get_store)):
    """Show every record again and restore the default filter values."""
    store.reset()
    payload = dashboard_payload(store)
    payload["notice"] = success_notice("Filters reset")
    return payload
