"""
Point metrics over a projected snapshot sequence.

Both functions scan in sequence order and return the snapshot itself (or None),
so callers get the date, balance and that day's events together.
"""

from __future__ import annotations

from typing import Optional, Sequence

from engine.events import DailySnapshot


def find_danger_date(snapshots: Sequence[DailySnapshot]) -> Optional[DailySnapshot]:
    """First day the balance goes negative, not the most negative day."""
    return next((s for s in snapshots if s.balance < 0), None)


def find_lowest_balance(snapshots: Sequence[DailySnapshot]) -> Optional[DailySnapshot]:
    """Day with the minimum balance; the earliest one wins on exact ties."""
    lowest: Optional[DailySnapshot] = None
    for s in snapshots:
        if lowest is None or s.balance < lowest.balance:
            lowest = s
    return lowest
