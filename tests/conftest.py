"""Shared fixtures for projection tests.

Every test pins day 0 to TODAY so projections are reproducible.
"""

from __future__ import annotations

from datetime import date

import pytest

from core.config import (
    BudgetConfig,
    FoodBudget,
    RecurringExpense,
    RecurringIncome,
    TransportConfig,
)

TODAY = date(2024, 1, 15)  # a Monday; TODAY + 1 month = 2024-02-15


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_budget():
    """Factory for BudgetConfig with a $1000 balance and a 1-month horizon."""

    def _make(**overrides) -> BudgetConfig:
        fields = {"initial_balance": 1000.0, "projection_months": 1}
        fields.update(overrides)
        return BudgetConfig(**fields)

    return _make


@pytest.fixture
def student_food() -> FoodBudget:
    return FoodBudget(
        enabled=True,
        weekday_breakfast=3,
        weekday_lunch=8,
        weekday_dinner=12,
        weekday_snacks=2,
        weekend_daily_total=30,
    )


@pytest.fixture
def commuter_transport() -> TransportConfig:
    return TransportConfig(
        enabled=True,
        auto_enabled=True,
        auto_weekday_miles=20,
        auto_weekend_miles=10,
        auto_mpg=30,
        auto_fuel_cost_per_gallon=3.50,
        public_enabled=False,
        public_weekly_cost=0,
    )


@pytest.fixture
def scenario_budget(make_budget) -> BudgetConfig:
    """$300 biweekly paycheck and $800 rent, both landing on day 0."""
    return make_budget(
        recurring_incomes=[
            RecurringIncome(
                label="Job",
                hours_per_week=10,
                hourly_rate=15,
                frequency="biweekly",
                start_date=TODAY,
            )
        ],
        recurring_expenses=[RecurringExpense(label="Rent", amount=800, day_of_month=15)],
    )
