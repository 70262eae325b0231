"""
Core package — budget configuration records, constants, and shared utilities.
No business logic lives here.
"""

from .schema import PAY_FREQUENCIES, SNAPSHOT_COLUMNS
from .config import (
    BudgetConfig,
    FoodBudget,
    OneTimeExpense,
    OneTimeIncome,
    RecurringExpense,
    RecurringIncome,
    TransportConfig,
)
from .utils import NonFiniteAmountError, add_months, round2, to_date

__all__ = [
    "PAY_FREQUENCIES",
    "SNAPSHOT_COLUMNS",
    "BudgetConfig",
    "FoodBudget",
    "OneTimeExpense",
    "OneTimeIncome",
    "RecurringExpense",
    "RecurringIncome",
    "TransportConfig",
    "NonFiniteAmountError",
    "add_months",
    "round2",
    "to_date",
]
