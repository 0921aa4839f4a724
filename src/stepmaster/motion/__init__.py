"""Motion classification and step detection."""

from stepmaster.motion.models import AccelerometerSample, ActivityLabel, MotionResult
from stepmaster.motion.step_detector import StepDetector

__all__ = ["AccelerometerSample", "ActivityLabel", "MotionResult", "StepDetector"]
