"""
Projection runner — walks one calendar day at a time from `today` to the horizon.

The only carried state is the running balance. Each day:
  1. standing food + transport costs go into the day's expenses (no events)
  2. matching income/expense rules add their amounts and one event each
  3. income and expenses are rounded to cents, then
     balance = round2(previous balance + income - expenses)

The balance carried forward is the rounded one, so every snapshot satisfies
balance[i] == round2(balance[i-1] + income_today[i] - expenses_today[i]) exactly.

`today` is always passed in. Two runs with the same config and the same `today`
produce identical snapshots.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import List

from core.config import BudgetConfig
from core.utils import add_months, calendar_days_between, round2, to_date

from .daily_costs import daily_food_cost, daily_transport_cost
from .events import ActiveRules, DailySnapshot, match_day_events

logger = logging.getLogger(__name__)


def run_projection(config: BudgetConfig, *, today) -> List[DailySnapshot]:
    """
    Run the day-by-day budget projection.

    Parameters
    ----------
    config : BudgetConfig
        Normalized budget configuration (read-only)
    today : date | datetime | str | pd.Timestamp
        Day 0 of the projection

    Returns
    -------
    One DailySnapshot per calendar day from `today` through
    `today + projection_months` calendar months, both ends inclusive.
    """
    if config.projection_months < 0:
        raise ValueError(
            f"projection_months must be non-negative, got {config.projection_months}."
        )

    start = to_date(today)
    horizon_end = add_months(start, config.projection_months)
    total_days = calendar_days_between(start, horizon_end)
    logger.debug(f"Projecting {total_days + 1} days: {start} -> {horizon_end}")

    rules = ActiveRules.from_config(config)
    food = config.food_budget
    transport = config.transport_config

    snapshots: List[DailySnapshot] = []
    balance = config.initial_balance

    for i in range(total_days + 1):
        day = start + timedelta(days=i)

        expenses = daily_food_cost(food, day) + daily_transport_cost(transport, day)
        income = 0.0

        events = match_day_events(day, rules)
        for ev in events:
            if ev.type == "income":
                income += ev.amount
            else:
                expenses += ev.amount

        income = round2(income, what=f"income on {day}")
        expenses = round2(expenses, what=f"expenses on {day}")
        balance = round2(balance + income - expenses, what=f"balance on {day}")

        snapshots.append(
            DailySnapshot(
                date=day,
                balance=balance,
                income_today=income,
                expenses_today=expenses,
                events=tuple(events),
            )
        )

    return snapshots
