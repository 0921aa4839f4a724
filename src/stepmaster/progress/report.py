"""Daily stats and combined progress reports."""

from datetime import date

from stepmaster.config import settings
from stepmaster.progress.badges import get_badges
from stepmaster.progress.challenges import get_daily_challenge
from stepmaster.progress.levels import get_level, lifetime_steps
from stepmaster.progress.models import DailyHistory, DailyStats, ProgressReport
from stepmaster.progress.ratio import progress_ratio
from stepmaster.progress.streaks import calculate_streak


def get_daily_stats(
    today: date,
    steps: int,
    goal: int,
    water_glasses: int = 0,
) -> DailyStats:
    """Calories, distance and goal progress for one day's counts."""
    return DailyStats(
        date=today,
        steps=steps,
        goal=goal,
        goal_progress=progress_ratio(steps, goal),
        calories_kcal=round(steps * settings.calories_per_step, 1),
        distance_km=round(steps * settings.km_per_step, 2),
        water_glasses=water_glasses,
        water_goal=settings.water_goal_glasses,
    )


def build_progress_report(
    history: DailyHistory,
    goal: int,
    today_steps: int,
    today: date,
) -> ProgressReport:
    """Compute every analytic for ``today`` from one history snapshot.

    The level uses the lifetime total while the challenge uses only today's
    count.
    """
    total = lifetime_steps(history)
    return ProgressReport(
        date=today,
        today_steps=today_steps,
        lifetime_steps=total,
        streak=calculate_streak(history, today),
        level=get_level(total),
        challenge=get_daily_challenge(goal, today_steps, today),
        badges=get_badges(history, today),
    )
