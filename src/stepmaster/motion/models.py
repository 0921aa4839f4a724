"""Data models for motion classification and step detection."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class AccelerometerSample(BaseModel):
    """Gravity-inclusive acceleration sample, in g."""
    x: float
    y: float
    z: float
    timestamp: Optional[datetime] = Field(
        default=None, description="Capture time; drives debounce and hysteresis when set"
    )


class ActivityLabel(str, Enum):
    """Types of activities the engine reports."""
    REST = "Rest"
    WALKING = "Walking"
    RUNNING = "Running"


class MotionResult(BaseModel):
    """Outcome of ingesting one sample."""
    activity: ActivityLabel
    step_detected: bool = False
    accepted: bool = Field(default=True, description="False when the sample was dropped")
    magnitude: Optional[float] = Field(default=None, description="Raw magnitude of the sample")
    smoothed_magnitude: Optional[float] = Field(
        default=None, description="Moving average over the smoothing window"
    )
