"""Sales Dashboard - CSV sales data cleaning, filtering, aggregation and export."""

__version__ = "1.0.0"
