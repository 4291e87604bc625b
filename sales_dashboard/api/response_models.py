"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from sales_dashboard.config import ERROR_TTL_SECONDS, SUCCESS_TTL_SECONDS
from sales_dashboard.data.schemas import FilterCriteria


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    rows: int
    active_rows: int
    locations: int


class LocationsResponse(BaseModel):
    locations: list[str]


class CategoriesResponse(BaseModel):
    categories: list[str]


class FilterRequest(BaseModel):
    start_date: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    end_date: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    location: Optional[str] = None

    @field_validator("start_date", "end_date", "location", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        # empty form inputs mean "no constraint"
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria(start_date=self.start_date, end_date=self.end_date, location=self.location)


class Notice(BaseModel):
    """A user-facing message the page shows and clears after ttl_seconds."""
    level: Literal["error", "success"]
    message: str
    ttl_seconds: int


def error_notice(message: str) -> dict[str, Any]:
    return Notice(level="error", message=message, ttl_seconds=ERROR_TTL_SECONDS).model_dump()


def success_notice(message: str) -> dict[str, Any]:
    return Notice(level="success", message=message, ttl_seconds=SUCCESS_TTL_SECONDS).model_dump()
