"""Consecutive active-day streaks."""

from datetime import date, timedelta
from typing import Optional

from stepmaster.config import settings
from stepmaster.progress.models import DailyHistory


def is_active_day(history: DailyHistory, day: date, min_steps: Optional[int] = None) -> bool:
    """True if the recorded steps for ``day`` reach the active-day threshold."""
    if min_steps is None:
        min_steps = settings.active_day_min_steps
    return history.get(day.isoformat(), 0) >= min_steps


def calculate_streak(history: DailyHistory, today: date, min_steps: Optional[int] = None) -> int:
    """Count consecutive active days ending today, or yesterday as a grace day.

    Today in progress may not have reached the threshold yet, so a streak
    that was active through yesterday still counts. Walking back stops at the
    first inactive or missing day.
    """
    yesterday = today - timedelta(days=1)

    if is_active_day(history, today, min_steps):
        anchor = today
    elif is_active_day(history, yesterday, min_steps):
        anchor = yesterday
    else:
        return 0

    streak = 1
    day = anchor - timedelta(days=1)
    while is_active_day(history, day, min_steps):
        streak += 1
        day -= timedelta(days=1)

    return streak
