"""Level catalog and lifetime progression."""

import math
from typing import List

from stepmaster.progress.models import DailyHistory, Level, LevelProgress
from stepmaster.progress.ratio import progress_ratio

LEVELS: List[Level] = [
    Level(level=1, title="Beginner", min_steps=0, max_steps=10_000),
    Level(level=2, title="Walker", min_steps=10_000, max_steps=50_000),
    Level(level=3, title="Jogger", min_steps=50_000, max_steps=100_000),
    Level(level=4, title="Runner", min_steps=100_000, max_steps=250_000),
    Level(level=5, title="Athlete", min_steps=250_000, max_steps=500_000),
    Level(level=6, title="Champion", min_steps=500_000, max_steps=1_000_000),
    Level(level=7, title="Legend", min_steps=1_000_000, max_steps=math.inf),
]


def lifetime_steps(history: DailyHistory) -> int:
    """Total steps across every recorded day."""
    return int(sum(history.values()))


def get_level(total_steps: float) -> LevelProgress:
    """Resolve the tier for a lifetime step total.

    Tiers are scanned from the top; the first whose lower bound is reached
    wins. The unbounded top tier always reports full progress. Negative or
    non-finite totals resolve to the first tier with no progress.
    """
    if math.isfinite(total_steps):
        for tier in reversed(LEVELS):
            if total_steps >= tier.min_steps:
                if math.isinf(tier.max_steps):
                    return LevelProgress(tier=tier, progress=1.0)
                progress = progress_ratio(
                    total_steps - tier.min_steps, tier.max_steps - tier.min_steps
                )
                return LevelProgress(tier=tier, progress=progress)

    return LevelProgress(tier=LEVELS[0], progress=0.0)
