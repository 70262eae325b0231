"""
Risk report — turns the danger date and lowest point into warning-banner output.

Answers the two questions the dashboard banner asks:
  Q1: "Does my balance ever go negative, and when first?" → danger_date
  Q2: "How bad does it get?"                              → lowest_point
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

import pandas as pd

from engine.events import DailySnapshot

from .metrics import find_danger_date, find_lowest_balance

logger = logging.getLogger(__name__)


def format_currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_day(day: date) -> str:
    return f"{day:%b} {day.day}, {day.year}"


@dataclass
class RiskReport:
    """Structured warning output for one projection."""
    danger_date: Optional[DailySnapshot]
    lowest_point: Optional[DailySnapshot]
    flags: List[str] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def goes_negative(self) -> bool:
        return self.danger_date is not None

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {
                "Metric": "First Negative Day",
                "Value": format_day(self.danger_date.date) if self.danger_date else "—",
            },
            {
                "Metric": "Lowest Balance",
                "Value": format_currency(self.lowest_point.balance) if self.lowest_point else "—",
            },
            {
                "Metric": "Lowest Balance Day",
                "Value": format_day(self.lowest_point.date) if self.lowest_point else "—",
            },
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags)})
        return pd.DataFrame(rows)


def generate_risk_report(
    snapshots: Sequence[DailySnapshot],
    *,
    low_balance_threshold: float = 0.0,
) -> RiskReport:
    """
    Build the risk report for a projection.

    Parameters
    ----------
    snapshots : sequence of DailySnapshot
        Output of engine.run_projection()
    low_balance_threshold : float
        A non-negative lowest balance below this raises LOW_BALANCE.
        The default of 0 never raises it.
    """
    danger = find_danger_date(snapshots)
    lowest = find_lowest_balance(snapshots)

    flags = []
    message = None
    if danger is not None:
        flags.append(f"NEGATIVE_BALANCE: balance goes negative on {danger.date.isoformat()}")
        deficit = abs(lowest.balance) if lowest is not None else 0.0
        message = f"Balance goes negative on {format_day(danger.date)}"
        if deficit > 0:
            message += f" · Lowest: {format_currency(-deficit)}"
        logger.warning(message)
    elif lowest is not None and lowest.balance < low_balance_threshold:
        flags.append(
            f"LOW_BALANCE: lowest balance {format_currency(lowest.balance)} on "
            f"{lowest.date.isoformat()} is below {format_currency(low_balance_threshold)}"
        )

    return RiskReport(danger_date=danger, lowest_point=lowest, flags=flags, message=message)
