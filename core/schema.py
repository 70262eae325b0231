from __future__ import annotations

from typing import Tuple

# Pay frequencies the payday scheduler understands. Anything else pays nothing.
PAY_FREQUENCIES: Tuple[str, ...] = ("weekly", "biweekly", "monthly")

# 52-week year
WEEKS_PER_MONTH: float = 52 / 12

# Recurring expenses are capped at the 28th so every month has a match.
MIN_DAY_OF_MONTH: int = 1
MAX_DAY_OF_MONTH: int = 28

EVENT_TYPES: Tuple[str, ...] = ("income", "expense")

# Column order of the tabular snapshot view (analytics.aggregator.snapshots_to_frame).
SNAPSHOT_COLUMNS: Tuple[str, ...] = (
    "date",
    "balance",
    "income_today",
    "expenses_today",
    "net_today",
    "event_count",
    "events",
)
