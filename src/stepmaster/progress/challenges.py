"""Deterministic daily challenges."""

import math
from dataclasses import dataclass
from datetime import date
from typing import List

from stepmaster.progress.models import DailyChallenge
from stepmaster.progress.ratio import progress_ratio


@dataclass(frozen=True)
class ChallengeTemplate:
    """Challenge wording and how far above (or below) the goal it sits."""

    title: str
    description: str  # {target} is replaced with the step target
    multiplier: float


CHALLENGE_TEMPLATES: List[ChallengeTemplate] = [
    ChallengeTemplate("Step Up!", "Walk {target} steps today", 1.2),
    ChallengeTemplate("Power Walk", "Hit {target} steps before dinner", 1.5),
    ChallengeTemplate("Easy Day", "Maintain {target} steps", 0.8),
    ChallengeTemplate("Push Limits", "Challenge yourself with {target} steps", 1.3),
]


def challenge_template(today: date) -> ChallengeTemplate:
    """Template for a calendar day; the same day always maps to the same one."""
    return CHALLENGE_TEMPLATES[today.day % len(CHALLENGE_TEMPLATES)]


def challenge_target(goal: float, multiplier: float) -> int:
    """Scale the goal and round half-up to the nearest thousand steps."""
    if not math.isfinite(goal) or goal <= 0:
        return 0
    return int(math.floor(goal * multiplier / 1000 + 0.5)) * 1000


def get_daily_challenge(goal: float, today_steps: int, today: date) -> DailyChallenge:
    """Build today's challenge from the daily goal and today's step count.

    A goal that yields no positive target is never completed and reports no
    progress.
    """
    template = challenge_template(today)
    target = challenge_target(goal, template.multiplier)

    return DailyChallenge(
        id=f"challenge_{today.isoformat()}",
        title=template.title,
        description=template.description.format(target=f"{target:,}"),
        target_steps=target,
        completed=target > 0 and today_steps >= target,
        progress=progress_ratio(today_steps, target),
    )
