"""
FastAPI dependencies - the app-owned RecordStore and Settings.
"""
from __future__ import annotations

from fastapi import HTTPException, Request

from sales_dashboard.config import Settings
from sales_dashboard.data.store import RecordStore


async def get_store_or_empty(request: Request) -> RecordStore:
    """Return the store even if nothing was loaded (health/reload endpoints)."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(503, "Server not initialized yet")
    return store


async def get_store(request: Request) -> RecordStore:
    store = await get_store_or_empty(request)
    if not store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return store


async def get_settings(request: Request) -> Settings:
    return request.app.state.settings
