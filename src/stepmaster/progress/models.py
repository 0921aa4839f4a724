"""Data models for progress analytics."""

from datetime import date
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

# ISO calendar date ("YYYY-MM-DD") -> steps recorded that day
DailyHistory = Dict[str, int]


class Level(BaseModel):
    """One tier of the level catalog, covering [min_steps, max_steps)."""
    model_config = ConfigDict(frozen=True)

    level: int
    title: str
    min_steps: int
    max_steps: float  # math.inf for the top tier


class LevelProgress(BaseModel):
    """Tier reached for a lifetime step total and progress towards the next."""
    tier: Level
    progress: float = Field(ge=0.0, le=1.0)

    @property
    def is_max_level(self) -> bool:
        return self.tier.max_steps == float("inf")


class Badge(BaseModel):
    """Achievement badge, recomputed from history on every query."""
    id: str
    name: str
    description: str
    icon: str
    color: str
    unlocked: bool = False
    progress: float = Field(default=0.0, ge=0.0, le=1.0)
    progress_text: str = ""


class DailyChallenge(BaseModel):
    """Challenge for one calendar day."""
    id: str = Field(description="challenge_<YYYY-MM-DD>")
    title: str
    description: str
    target_steps: int
    completed: bool
    progress: float = Field(ge=0.0, le=1.0)


class DailyStats(BaseModel):
    """Derived figures for today's step and water counts."""
    date: date
    steps: int
    goal: int
    goal_progress: float = Field(ge=0.0, le=1.0)
    calories_kcal: float
    distance_km: float
    water_glasses: int = 0
    water_goal: int = 8


class ProgressReport(BaseModel):
    """Snapshot of every analytic for one day."""
    date: date
    today_steps: int
    lifetime_steps: int
    streak: int
    level: LevelProgress
    challenge: DailyChallenge
    badges: List[Badge]
