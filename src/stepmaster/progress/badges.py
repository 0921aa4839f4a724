"""Badge catalog and unlock state."""

from datetime import date
from typing import List

import structlog

from stepmaster.progress.levels import lifetime_steps
from stepmaster.progress.models import Badge, DailyHistory
from stepmaster.progress.ratio import progress_ratio
from stepmaster.progress.streaks import calculate_streak

logger = structlog.get_logger(__name__)

STREAK_BADGE_DAYS = 7
DAILY_BADGE_STEPS = 10_000
LIFETIME_BADGE_STEPS = 50_000
WEEKEND_BADGE_STEPS = 5_000

# date.weekday() values for Saturday and Sunday
WEEKEND_DAYS = (5, 6)


def has_weekend_activity(history: DailyHistory, min_steps: int = WEEKEND_BADGE_STEPS) -> bool:
    """True if any Saturday or Sunday in the history reached ``min_steps``."""
    for day_str, steps in history.items():
        try:
            day = date.fromisoformat(day_str)
        except ValueError:
            logger.debug("Skipping unparseable history date", date=day_str)
            continue
        if day.weekday() in WEEKEND_DAYS and steps >= min_steps:
            return True
    return False


def get_badges(history: DailyHistory, today: date) -> List[Badge]:
    """Derive all six badges from a history snapshot.

    ``early_bird`` and ``night_owl`` need time-of-day data that the history
    does not record, so they are always locked.
    """
    streak = calculate_streak(history, today)
    total_steps = lifetime_steps(history)
    max_daily_steps = max(history.values(), default=0)
    weekend_active = has_weekend_activity(history)

    return [
        Badge(
            id="streak_7",
            name="Hot Streak",
            description="7-day active streak",
            icon="flame",
            color="#f97316",
            unlocked=streak >= STREAK_BADGE_DAYS,
            progress=progress_ratio(streak, STREAK_BADGE_DAYS),
            progress_text=f"{streak}/{STREAK_BADGE_DAYS} Days",
        ),
        Badge(
            id="club_10k",
            name="10K Club",
            description="10,000 steps in one day",
            icon="footsteps",
            color="#3b82f6",
            unlocked=max_daily_steps >= DAILY_BADGE_STEPS,
            progress=progress_ratio(max_daily_steps, DAILY_BADGE_STEPS),
            progress_text=(
                "Unlocked!"
                if max_daily_steps >= DAILY_BADGE_STEPS
                else f"{max_daily_steps / 1000:.1f}k/10k"
            ),
        ),
        Badge(
            id="lifetime_50k",
            name="Marathoner",
            description="50,000 total lifetime steps",
            icon="trophy",
            color="#eab308",
            unlocked=total_steps >= LIFETIME_BADGE_STEPS,
            progress=progress_ratio(total_steps, LIFETIME_BADGE_STEPS),
            progress_text=f"{total_steps / 1000:.0f}k/50k",
        ),
        Badge(
            id="early_bird",
            name="Early Bird",
            description="Walk 1000+ steps by 8 AM",
            icon="sunny",
            color="#f59e0b",
            progress_text="Walk early!",
        ),
        Badge(
            id="night_owl",
            name="Night Owl",
            description="Hit 5000 steps after 8 PM",
            icon="moon",
            color="#8b5cf6",
            progress_text="Walk late!",
        ),
        Badge(
            id="weekend_warrior",
            name="Weekend Warrior",
            description="5000+ steps on weekend",
            icon="calendar",
            color="#22c55e",
            unlocked=weekend_active,
            progress=1.0 if weekend_active else 0.0,
            progress_text="Unlocked!" if weekend_active else "Walk Sat/Sun",
        ),
    ]
