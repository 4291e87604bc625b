"""
Sales Dashboard - FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sales_dashboard.config import Settings
from sales_dashboard.data.loader import load_records
from sales_dashboard.data.store import RecordStore
from sales_dashboard.errors import LoadError
from sales_dashboard.logging_setup import configure_logging, get_logger
from sales_dashboard.api.router_meta import router as meta_router
from sales_dashboard.api.router_dashboard import router as dashboard_router
from sales_dashboard.api.router_export import router as export_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the data file at startup. A failed load leaves the dashboard empty."""
    settings: Settings = app.state.settings
    store = RecordStore(settings.defaults)
    app.state.store = store

    logger.info("Dashboard initializing from %s", settings.data_file)
    try:
        records, report = await load_records(settings.data_file)
    except LoadError as exc:
        logger.error("Startup load failed: %s (cause: %s)", exc.message, exc.__cause__)
    else:
        store.load(records)
        logger.info(
            "Sales Dashboard ready - %d records (%d rows dropped), %d locations",
            store.row_count(), report.dropped_count, len(store.locations()),
        )
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Sales Dashboard API",
        description="Sales CSV dashboard - stats, chart series, filters, CSV export",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings.from_env()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(dashboard_router)
    app.include_router(export_router)
    return app


app = create_app()
