"""
Projection engine — payday scheduling, daily costs, and the day-by-day simulation loop.
"""

from .daily_costs import daily_food_cost, daily_transport_cost
from .events import DailyEvent, DailySnapshot
from .paydays import is_payday, paycheck_amount
from .runner import run_projection

__all__ = [
    "run_projection",
    "DailyEvent",
    "DailySnapshot",
    "is_payday",
    "paycheck_amount",
    "daily_food_cost",
    "daily_transport_cost",
]
