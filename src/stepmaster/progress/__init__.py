"""Progress analytics: streaks, levels, daily challenges and badges.

Every function here is pure over its explicit inputs, so results can be
memoized per day and computed from any thread.
"""

from stepmaster.progress.badges import get_badges, has_weekend_activity
from stepmaster.progress.challenges import CHALLENGE_TEMPLATES, get_daily_challenge
from stepmaster.progress.levels import LEVELS, get_level, lifetime_steps
from stepmaster.progress.models import (
    Badge,
    DailyChallenge,
    DailyHistory,
    DailyStats,
    Level,
    LevelProgress,
    ProgressReport,
)
from stepmaster.progress.report import build_progress_report, get_daily_stats
from stepmaster.progress.streaks import calculate_streak, is_active_day

__all__ = [
    "Badge",
    "CHALLENGE_TEMPLATES",
    "DailyChallenge",
    "DailyHistory",
    "DailyStats",
    "LEVELS",
    "Level",
    "LevelProgress",
    "ProgressReport",
    "build_progress_report",
    "calculate_streak",
    "get_badges",
    "get_daily_challenge",
    "get_daily_stats",
    "get_level",
    "has_weekend_activity",
    "is_active_day",
    "lifetime_steps",
]
