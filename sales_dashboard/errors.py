"""
Error kinds surfaced to the user. Each carries the message shown on the page.
"""
from __future__ import annotations


class DashboardError(Exception):
    """Base class for recoverable dashboard failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LoadError(DashboardError):
    """The data file could not be read or parsed."""


class ValidationError(DashboardError):
    """Filter criteria are inconsistent (e.g. start date after end date)."""


class ExportError(DashboardError):
    """There is nothing to export."""
