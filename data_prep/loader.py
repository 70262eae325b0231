from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import ValidationError

from core.config import BudgetConfig

logger = logging.getLogger(__name__)


class BudgetFormatError(ValueError):
    """The budget document is not valid JSON or does not fit the BudgetConfig shape."""


def parse_budget_config(data: Union[str, bytes, Mapping[str, Any]]) -> BudgetConfig:
    """
    Parse an exported budget document (JSON text or decoded mapping).

    Missing `enabled` flags are filled with True; unknown keys such as the
    UI's per-item `id` are ignored.
    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as exc:
            raise BudgetFormatError(f"Invalid JSON: {exc.msg} (line {exc.lineno})") from exc

    if not isinstance(data, Mapping):
        raise BudgetFormatError(
            f"Budget document must be a JSON object, got {type(data).__name__}."
        )

    try:
        return BudgetConfig.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise BudgetFormatError(f"Invalid budget document: {problems}") from exc


def load_budget_json(path: Union[str, Path]) -> BudgetConfig:
    path = Path(path)
    config = parse_budget_config(path.read_text(encoding="utf-8"))
    logger.info(
        f"Loaded budget from {path}: "
        f"{len(config.recurring_incomes)} recurring incomes, "
        f"{len(config.one_time_incomes)} one-time incomes, "
        f"{len(config.recurring_expenses)} recurring expenses, "
        f"{len(config.one_time_expenses)} one-time expenses"
    )
    return config


def dump_budget_json(config: BudgetConfig, *, indent: int = 2) -> str:
    """Serialize with the document's camelCase keys and ISO dates."""
    return json.dumps(config.model_dump(mode="json", by_alias=True), indent=indent)
