"""
Payday scheduling for recurring income.

A rule pays on its anchor date (`start_date`) and then every 7 or 14 days, or
on the anchor's day-of-month for monthly pay. Monthly pay is NOT clamped: an
income anchored on the 31st simply skips months without a 31st.
"""

from __future__ import annotations

from datetime import date

from core.config import RecurringIncome
from core.schema import WEEKS_PER_MONTH
from core.utils import calendar_days_between


def paycheck_amount(income: RecurringIncome) -> float:
    """
    Gross pay for a single paycheck.

    Monthly pay is the annualized weekly pay spread over 12 months (52/12 weeks),
    not the exact number of weeks in a given calendar month.
    """
    weekly = income.hours_per_week * income.hourly_rate
    if income.frequency == "weekly":
        return weekly
    if income.frequency == "biweekly":
        return weekly * 2
    if income.frequency == "monthly":
        return weekly * WEEKS_PER_MONTH
    return 0.0


def is_payday(day: date, income: RecurringIncome) -> bool:
    days_diff = calendar_days_between(income.start_date, day)

    if days_diff < 0:
        return False
    if income.end_date is not None and day > income.end_date:
        return False

    if income.frequency == "weekly":
        return days_diff % 7 == 0
    if income.frequency == "biweekly":
        return days_diff % 14 == 0
    if income.frequency == "monthly":
        return day.day == income.start_date.day
    return False
