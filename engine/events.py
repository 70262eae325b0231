"""
Per-day rule matching — which discrete incomes and expenses land on a given day.

Each matching rule becomes one DailyEvent. Events for a day are always ordered:
  1. recurring income (paychecks)
  2. one-time income
  3. recurring expenses
  4. one-time expenses
and, within each group, in configuration order. Downstream displays rely on
this ordering being stable for a given day.

Food and transport costs are not rules and never produce events.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Literal, Tuple

from core.config import (
    BudgetConfig,
    OneTimeExpense,
    OneTimeIncome,
    RecurringExpense,
    RecurringIncome,
)

from .paydays import is_payday, paycheck_amount


@dataclass(frozen=True)
class DailyEvent:
    """One income or expense rule that matched a simulated day."""
    label: str
    amount: float
    type: Literal["income", "expense"]
    is_one_time: bool = False


@dataclass(frozen=True)
class DailySnapshot:
    """State of the projection at the end of one simulated calendar day."""
    date: date
    balance: float
    income_today: float
    expenses_today: float
    events: Tuple[DailyEvent, ...] = ()


@dataclass(frozen=True)
class ActiveRules:
    """The enabled subset of each rule collection, filtered once per run."""
    recurring_incomes: Tuple[RecurringIncome, ...]
    one_time_incomes: Tuple[OneTimeIncome, ...]
    recurring_expenses: Tuple[RecurringExpense, ...]
    one_time_expenses: Tuple[OneTimeExpense, ...]

    @classmethod
    def from_config(cls, config: BudgetConfig) -> "ActiveRules":
        return cls(
            recurring_incomes=tuple(r for r in config.recurring_incomes if r.enabled),
            one_time_incomes=tuple(r for r in config.one_time_incomes if r.enabled),
            recurring_expenses=tuple(r for r in config.recurring_expenses if r.enabled),
            one_time_expenses=tuple(r for r in config.one_time_expenses if r.enabled),
        )


def match_day_events(day: date, rules: ActiveRules) -> List[DailyEvent]:
    events: List[DailyEvent] = []

    for income in rules.recurring_incomes:
        if is_payday(day, income):
            events.append(
                DailyEvent(
                    label=f"{income.label} paycheck",
                    amount=paycheck_amount(income),
                    type="income",
                )
            )

    for oti in rules.one_time_incomes:
        if oti.date == day:
            events.append(DailyEvent(oti.label, oti.amount, "income", is_one_time=True))

    for expense in rules.recurring_expenses:
        if expense.day_of_month == day.day:
            events.append(DailyEvent(expense.label, expense.amount, "expense"))

    for ote in rules.one_time_expenses:
        if ote.date == day:
            events.append(DailyEvent(ote.label, ote.amount, "expense", is_one_time=True))

    return events
