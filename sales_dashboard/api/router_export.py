"""
Export endpoint - the active records as a CSV download.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from sales_dashboard.config import EXPORT_MEDIA_TYPE
from sales_dashboard.data.store import RecordStore
from sales_dashboard.errors import ExportError
from sales_dashboard.export import generate_filename, to_delimited_text
from sales_dashboard.logging_setup import get_logger
from sales_dashboard.api.dependencies import get_store
from sales_dashboard.api.response_models import error_notice

router = APIRouter(prefix="/api", tags=["export"])
logger = get_logger(__name__)


@router.get("/export")
async def export_csv(store: RecordStore = Depends(get_store)):
    """Download the currently filtered records."""
    active = store.active
    try:
        text = to_delimited_text(active)
    except ExportError as exc:
        raise HTTPException(400, detail=error_notice(exc.message))

    filename = generate_filename()
    logger.info("CSV exported: %d records as %s", len(active), filename)
    return Response(
        content=text,
        media_type=f"{EXPORT_MEDIA_TYPE}; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "X-Record-Count": str(len(active)),
        },
    )
