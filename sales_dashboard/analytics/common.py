"""
Safe math helpers and DataFrame conversion shared by the analytics modules.
"""
from __future__ import annotations

import math
from dataclasses import asdict
from typing import Sequence

import numpy as np
import pandas as pd

from sales_dashboard.data.schemas import Record


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide safely, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def pct_of_total(part: float, total: float) -> float:
    """Percentage of total."""
    return safe_divide(part, total) * 100


def records_frame(records: Sequence[Record]) -> pd.DataFrame:
    """Records as a DataFrame with one column per Record field, in field order."""
    columns = Record.field_names()
    if not records:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame([asdict(r) for r in records], columns=columns)


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas types to native Python for JSON serialization."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, float):
        return 0.0 if (math.isnan(obj) or math.isinf(obj)) else obj
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj
