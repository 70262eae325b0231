"""
Budget configuration records.

The root input of a projection run. Every record is frozen, so a run can never
mutate its configuration, and accepts the camelCase keys of the exported budget
document as well as the snake_case field names. `enabled` is filled with True
here, once, so the engine only ever sees real booleans.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .schema import MAX_DAY_OF_MONTH, MIN_DAY_OF_MONTH


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class RecurringIncome(_Record):
    """Hourly job paid on a weekly, biweekly or monthly cycle from `start_date`."""

    label: str
    hours_per_week: float = 0.0
    hourly_rate: float = 0.0
    frequency: str = "biweekly"
    start_date: dt.date
    end_date: Optional[dt.date] = None  # inclusive
    enabled: bool = True


class OneTimeIncome(_Record):
    label: str
    amount: float = 0.0
    date: dt.date
    enabled: bool = True


class RecurringExpense(_Record):
    label: str
    amount: float = 0.0
    day_of_month: int = Field(default=1, ge=MIN_DAY_OF_MONTH, le=MAX_DAY_OF_MONTH)
    enabled: bool = True


class OneTimeExpense(_Record):
    label: str
    amount: float = 0.0
    date: dt.date
    enabled: bool = True


class FoodBudget(_Record):
    enabled: bool = False
    weekday_breakfast: float = 0.0
    weekday_lunch: float = 0.0
    weekday_dinner: float = 0.0
    weekday_snacks: float = 0.0
    weekend_daily_total: float = 0.0


class TransportConfig(_Record):
    enabled: bool = False

    auto_enabled: bool = False
    auto_weekday_miles: float = 0.0
    auto_weekend_miles: float = 0.0
    auto_mpg: float = 0.0
    auto_fuel_cost_per_gallon: float = 0.0

    public_enabled: bool = False
    public_weekly_cost: float = 0.0


class BudgetConfig(_Record):
    initial_balance: float = 0.0
    projection_months: int = 12

    recurring_incomes: Tuple[RecurringIncome, ...] = ()
    one_time_incomes: Tuple[OneTimeIncome, ...] = ()
    recurring_expenses: Tuple[RecurringExpense, ...] = ()
    one_time_expenses: Tuple[OneTimeExpense, ...] = ()

    food_budget: FoodBudget = Field(default_factory=FoodBudget)
    transport_config: TransportConfig = Field(default_factory=TransportConfig)
