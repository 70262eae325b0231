"""
Aggregate a snapshot sequence into dashboard-ready totals and tables.

  - snapshots_to_frame:   one row per day, for charts and exports
  - summarize_projection: total income / expenses / net over the whole horizon
  - aggregate_monthly:    income vs expenses per calendar month
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

import pandas as pd

from core.schema import SNAPSHOT_COLUMNS
from core.utils import excel_round, round2
from engine.events import DailySnapshot


@dataclass(frozen=True)
class ProjectionSummary:
    """Horizon-wide totals shown in the summary cards."""
    total_income: float
    total_expenses: float
    net: float
    ending_balance: float
    start_date: Optional[date]
    end_date: Optional[date]
    n_days: int


def snapshots_to_frame(snapshots: Sequence[DailySnapshot]) -> pd.DataFrame:
    """
    Flatten snapshots into a DataFrame.

    `events` holds the event labels joined with "; " so the frame stays flat.
    """
    rows = [
        {
            "date": pd.Timestamp(s.date),
            "balance": s.balance,
            "income_today": s.income_today,
            "expenses_today": s.expenses_today,
            "net_today": s.income_today - s.expenses_today,
            "event_count": len(s.events),
            "events": "; ".join(ev.label for ev in s.events),
        }
        for s in snapshots
    ]
    df = pd.DataFrame(rows, columns=list(SNAPSHOT_COLUMNS))
    df["net_today"] = excel_round(df["net_today"].to_numpy(dtype=float), 2)
    return df


def summarize_projection(snapshots: Sequence[DailySnapshot]) -> ProjectionSummary:
    if not snapshots:
        return ProjectionSummary(
            total_income=0.0,
            total_expenses=0.0,
            net=0.0,
            ending_balance=0.0,
            start_date=None,
            end_date=None,
            n_days=0,
        )

    total_income = round2(sum(s.income_today for s in snapshots), what="total income")
    total_expenses = round2(sum(s.expenses_today for s in snapshots), what="total expenses")
    return ProjectionSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net=round2(total_income - total_expenses, what="net"),
        ending_balance=snapshots[-1].balance,
        start_date=snapshots[0].date,
        end_date=snapshots[-1].date,
        n_days=len(snapshots),
    )


def aggregate_monthly(snapshots: Sequence[DailySnapshot]) -> pd.DataFrame:
    """
    Income vs expenses per calendar month, in chronological order.

    Partial months at either end of the horizon only include projected days.
    Columns: month ("YYYY-MM"), income, expenses, net.
    """
    df = snapshots_to_frame(snapshots)
    if df.empty:
        return pd.DataFrame(columns=["month", "income", "expenses", "net"])

    df["month"] = df["date"].dt.strftime("%Y-%m")
    monthly = (
        df.groupby("month", as_index=False, sort=True)[["income_today", "expenses_today"]]
        .sum()
        .rename(columns={"income_today": "income", "expenses_today": "expenses"})
    )
    monthly["net"] = monthly["income"] - monthly["expenses"]
    for col in ["income", "expenses", "net"]:
        monthly[col] = excel_round(monthly[col].to_numpy(dtype=float), 2)
    return monthly.reset_index(drop=True)
