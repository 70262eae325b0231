"""
Data preparation — loading exported budget documents and pre-flight validation.
"""

from .loader import BudgetFormatError, dump_budget_json, load_budget_json, parse_budget_config
from .validators import ValidationResult, validate_budget

__all__ = [
    "BudgetFormatError",
    "dump_budget_json",
    "load_budget_json",
    "parse_budget_config",
    "ValidationResult",
    "validate_budget",
]
