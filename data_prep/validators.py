"""
Pre-flight checks for a budget before it enters the engine.

The engine never raises for well-typed input, so problems that would silently
zero out a rule, or corrupt every balance after a given day, are caught here:
- Non-finite or negative amounts
- Income end dates before their start dates
- Rules that can never fire (unknown pay frequency, zero mpg, items outside the horizon)
- Monthly pay anchored on the 29th-31st, which skips short months
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from core.config import BudgetConfig
from core.schema import PAY_FREQUENCIES
from core.utils import add_months, to_date

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a budget."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _check_amount(result: ValidationResult, where: str, value: float) -> None:
    if not math.isfinite(value):
        result.errors.append(f"{where} is not a finite number ({value!r}).")
    elif value < 0:
        result.errors.append(f"{where} is negative ({value}).")


def _check_duplicates(result: ValidationResult, collection: str, labels: Iterable[str]) -> None:
    dups = sorted(label for label, n in Counter(labels).items() if n > 1)
    if dups:
        result.warnings.append(f"Duplicate labels in {collection}: {dups}")


def validate_budget(config: BudgetConfig, *, today: Optional[date] = None) -> ValidationResult:
    """
    Run all validation checks on a budget.
    Returns a ValidationResult with errors (blocking) and warnings (informational).

    Horizon checks on one-time items only run when `today` is given.
    """
    result = ValidationResult()

    # --- Top level ---
    if not math.isfinite(config.initial_balance):
        result.errors.append(f"Initial balance is not a finite number ({config.initial_balance!r}).")
    if config.projection_months < 1:
        result.errors.append(
            f"Projection length must be at least 1 month, got {config.projection_months}."
        )

    # --- Recurring income ---
    for inc in config.recurring_incomes:
        where = f"Recurring income '{inc.label}'"
        _check_amount(result, f"{where} hours per week", inc.hours_per_week)
        _check_amount(result, f"{where} hourly rate", inc.hourly_rate)
        if inc.end_date is not None and inc.end_date < inc.start_date:
            result.errors.append(
                f"{where} ends ({inc.end_date}) before it starts ({inc.start_date})."
            )
        if inc.frequency not in PAY_FREQUENCIES:
            result.warnings.append(
                f"{where} has unknown frequency '{inc.frequency}' — it will never pay."
            )
        elif inc.frequency == "monthly" and inc.start_date.day > 28:
            result.warnings.append(
                f"{where} is paid monthly on day {inc.start_date.day} — "
                f"months without that day have no payday."
            )

    # --- One-time items and recurring expenses ---
    for oti in config.one_time_incomes:
        _check_amount(result, f"One-time income '{oti.label}' amount", oti.amount)
    for exp in config.recurring_expenses:
        _check_amount(result, f"Recurring expense '{exp.label}' amount", exp.amount)
    for ote in config.one_time_expenses:
        _check_amount(result, f"One-time expense '{ote.label}' amount", ote.amount)

    # --- Standing daily costs ---
    food = config.food_budget
    for name in ["weekday_breakfast", "weekday_lunch", "weekday_dinner", "weekday_snacks",
                 "weekend_daily_total"]:
        _check_amount(result, f"Food budget {name}", getattr(food, name))

    transport = config.transport_config
    for name in ["auto_weekday_miles", "auto_weekend_miles", "auto_fuel_cost_per_gallon",
                 "public_weekly_cost"]:
        _check_amount(result, f"Transport {name}", getattr(transport, name))
    if not math.isfinite(transport.auto_mpg):
        result.errors.append(f"Transport auto_mpg is not a finite number ({transport.auto_mpg!r}).")
    elif transport.enabled and transport.auto_enabled and transport.auto_mpg <= 0:
        result.warnings.append(
            f"Auto transport is enabled with mpg {transport.auto_mpg} — fuel cost will be 0."
        )

    # --- Horizon ---
    if today is not None and config.projection_months >= 0:
        start = to_date(today)
        end = add_months(start, config.projection_months)
        for kind, items in [
            ("One-time income", config.one_time_incomes),
            ("One-time expense", config.one_time_expenses),
        ]:
            for item in items:
                if item.enabled and not (start <= item.date <= end):
                    result.warnings.append(
                        f"{kind} '{item.label}' on {item.date} is outside the projection "
                        f"({start} to {end}) and will not be counted."
                    )

    # --- Labels ---
    _check_duplicates(result, "recurring incomes", (r.label for r in config.recurring_incomes))
    _check_duplicates(result, "one-time incomes", (r.label for r in config.one_time_incomes))
    _check_duplicates(result, "recurring expenses", (r.label for r in config.recurring_expenses))
    _check_duplicates(result, "one-time expenses", (r.label for r in config.one_time_expenses))

    logger.debug(
        f"Budget validation: {len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result
