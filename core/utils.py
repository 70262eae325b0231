from __future__ import annotations

import math
from datetime import date, datetime

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta


class NonFiniteAmountError(ValueError):
    """A NaN or infinite value reached a rounded output of the projection."""


def excel_round(x, decimals: int = 2):
    """Excel ROUND: half away from zero (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)


def round2(value: float, *, what: str = "value") -> float:
    """
    Round a scalar to cents, half away from zero.

    Raises NonFiniteAmountError for NaN/Inf so a corrupted amount cannot
    propagate into every following day of a projection.
    """
    value = float(value)
    if not math.isfinite(value):
        raise NonFiniteAmountError(f"Non-finite {what}: {value!r}")
    return float(excel_round(value, 2))


def to_date(value) -> date:
    """Normalize a date, datetime, pandas Timestamp or ISO string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Not a date: {value!r}")
    return ts.date()


def add_months(start: date, months: int) -> date:
    """Calendar-month offset, clamping to month end (Jan 31 + 1 month = Feb 28/29)."""
    return start + relativedelta(months=months)


def calendar_days_between(start: date, end: date) -> int:
    """Signed count of calendar days from start to end."""
    return (end - start).days


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5
