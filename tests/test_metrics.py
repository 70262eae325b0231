"""Tests for danger-date and lowest-balance detection."""

from __future__ import annotations

from datetime import date, timedelta

from analytics.metrics import find_danger_date, find_lowest_balance
from engine.events import DailySnapshot


def _snaps(*balances):
    start = date(2024, 1, 15)
    return [
        DailySnapshot(date=start + timedelta(days=i), balance=b, income_today=0.0,
                      expenses_today=0.0)
        for i, b in enumerate(balances)
    ]


class TestDangerDate:

    def test_earliest_negative_not_most_negative(self):
        snaps = _snaps(100, -5, 20, -500, -10)
        assert find_danger_date(snaps) is snaps[1]

    def test_zero_is_not_danger(self):
        assert find_danger_date(_snaps(10, 0, 0.01)) is None

    def test_empty(self):
        assert find_danger_date([]) is None


class TestLowestBalance:

    def test_global_minimum(self):
        snaps = _snaps(100, -5, 20, -500, -10)
        assert find_lowest_balance(snaps) is snaps[3]

    def test_first_occurrence_wins_ties(self):
        snaps = _snaps(50, 10, 30, 10, 10)
        assert find_lowest_balance(snaps) is snaps[1]

    def test_single_snapshot(self):
        snaps = _snaps(42)
        assert find_lowest_balance(snaps) is snaps[0]

    def test_empty(self):
        assert find_lowest_balance([]) is None
