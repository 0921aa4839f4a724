"""Request and response bodies for the HTTP API."""

from datetime import date
from typing import Dict, List

from pydantic import BaseModel, Field

from stepmaster.motion.models import AccelerometerSample, ActivityLabel
from stepmaster.progress.models import LevelProgress


class SampleBatch(BaseModel):
    """Accelerometer samples in arrival order."""
    samples: List[AccelerometerSample] = Field(min_length=1)


class SampleBatchResult(BaseModel):
    accepted: int
    dropped: int
    steps_detected: int
    activity: ActivityLabel
    today_steps: int


class GoalUpdate(BaseModel):
    goal: int


class WaterChange(BaseModel):
    change: int = Field(description="Glasses to add, negative to remove")


class WaterCount(BaseModel):
    date: date
    water_glasses: int


class HistoryResponse(BaseModel):
    history: Dict[str, int]
    goal: int


class LevelResponse(BaseModel):
    lifetime_steps: int
    level: LevelProgress


class StreakResponse(BaseModel):
    date: date
    streak: int
