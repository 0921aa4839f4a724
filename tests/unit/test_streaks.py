"""Unit tests for streak calculation."""

from datetime import date

import pytest

from stepmaster.progress import calculate_streak, is_active_day
from tests.conftest import days_ago


class TestIsActiveDay:
    def test_threshold_is_inclusive(self, today):
        assert is_active_day({today.isoformat(): 1000}, today) is True
        assert is_active_day({today.isoformat(): 999}, today) is False

    def test_missing_day_is_inactive(self, today):
        assert is_active_day({}, today) is False


class TestCalculateStreak:
    """Test consecutive active-day counting."""

    def test_empty_history(self, today):
        assert calculate_streak({}, today) == 0

    def test_single_active_today(self, today):
        assert calculate_streak({today.isoformat(): 2000}, today) == 1

    def test_consecutive_days(self, today):
        history = {days_ago(n): 2000 for n in range(5)}
        assert calculate_streak(history, today) == 5

    def test_gap_breaks_streak(self, today):
        history = {days_ago(0): 2000, days_ago(2): 2000}
        assert calculate_streak(history, today) == 1

    def test_days_below_threshold_do_not_count(self, today):
        assert calculate_streak({today.isoformat(): 500}, today) == 0

    def test_yesterday_is_a_grace_day(self, today):
        history = {days_ago(1): 3000, days_ago(2): 3000, days_ago(3): 3000}
        assert calculate_streak(history, today) == 3

    def test_inactive_today_in_progress_keeps_streak(self, today):
        history = {days_ago(0): 400, days_ago(1): 3000, days_ago(2): 3000}
        assert calculate_streak(history, today) == 2

    def test_streak_over_two_days_ago_is_lost(self, today):
        history = {days_ago(2): 3000, days_ago(3): 3000}
        assert calculate_streak(history, today) == 0

    def test_walks_across_month_and_leap_day(self):
        today = date(2024, 3, 1)
        history = {"2024-03-01": 1500, "2024-02-29": 1500, "2024-02-28": 1500}
        assert calculate_streak(history, today) == 3

    @pytest.mark.parametrize("future_steps", [0, 5000, 50000])
    def test_future_days_are_ignored(self, today, future_steps):
        history = {days_ago(0): 2000, days_ago(1): 2000}
        with_future = dict(history, **{days_ago(-1): future_steps, days_ago(-2): 9000})
        assert calculate_streak(with_future, today) == calculate_streak(history, today)

    def test_unparseable_keys_are_ignored(self, today):
        history = {days_ago(0): 2000, "garbage": 9000}
        assert calculate_streak(history, today) == 1
