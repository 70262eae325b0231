"""
Standing daily costs: food and commuting.

These are always-on daily rates gated only by their top-level `enabled` flags.
They feed a day's expense total but are never listed as events.
"""

from __future__ import annotations

from datetime import date

from core.config import FoodBudget, TransportConfig
from core.utils import is_weekend


def daily_food_cost(food: FoodBudget, day: date) -> float:
    if not food.enabled:
        return 0.0
    if is_weekend(day):
        return food.weekend_daily_total
    return (
        food.weekday_breakfast
        + food.weekday_lunch
        + food.weekday_dinner
        + food.weekday_snacks
    )


def daily_transport_cost(transport: TransportConfig, day: date) -> float:
    """
    Fuel cost for the day's driving plus an even 1/7 share of the weekly transit pass.

    A non-positive `auto_mpg` contributes nothing rather than dividing by zero.
    """
    if not transport.enabled:
        return 0.0

    cost = 0.0
    if transport.auto_enabled and transport.auto_mpg > 0:
        miles = (
            transport.auto_weekend_miles if is_weekend(day) else transport.auto_weekday_miles
        )
        gallons = miles / transport.auto_mpg
        cost += gallons * transport.auto_fuel_cost_per_gallon
    if transport.public_enabled:
        cost += transport.public_weekly_cost / 7
    return cost
