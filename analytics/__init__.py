"""
Analytics over projected snapshots — danger date, lowest point, summaries, and risk flags.
"""

from .metrics import find_danger_date, find_lowest_balance
from .aggregator import aggregate_monthly, snapshots_to_frame, summarize_projection
from .risk import generate_risk_report

__all__ = [
    "find_danger_date",
    "find_lowest_balance",
    "aggregate_monthly",
    "snapshots_to_frame",
    "summarize_projection",
    "generate_risk_report",
]
