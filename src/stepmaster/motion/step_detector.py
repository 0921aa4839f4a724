"""Step detection and activity classification for accelerometer data."""

from collections import deque
from datetime import datetime, timedelta, timezone
from typing import Optional

import numpy as np
import structlog

from stepmaster.clock import Clock, SystemClock
from stepmaster.config import settings
from stepmaster.motion.models import AccelerometerSample, ActivityLabel, MotionResult

logger = structlog.get_logger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class StepDetector:
    """Detects steps and classifies activity one sample at a time.

    Steps are detected on the raw magnitude with a short refractory window,
    favouring missed-step avoidance over precision. The activity label uses a
    moving average of the magnitude, except within a short window after a
    step where Walking (or Running) is reported regardless of the average.

    Not thread-safe: callers must serialize ``ingest``.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        window_size: Optional[int] = None,
        step_threshold: Optional[float] = None,
        debounce_ms: Optional[float] = None,
        recent_step_ms: Optional[float] = None,
        walking_threshold: Optional[float] = None,
        running_threshold: Optional[float] = None,
        max_abs_acceleration: Optional[float] = None,
    ):
        self.clock = clock or SystemClock()
        self.window_size = window_size or settings.smoothing_window_size
        self.step_threshold = (
            settings.step_threshold_g if step_threshold is None else step_threshold
        )
        self.debounce_ms = settings.step_debounce_ms if debounce_ms is None else debounce_ms
        self.recent_step_ms = (
            settings.recent_step_window_ms if recent_step_ms is None else recent_step_ms
        )
        self.walking_threshold = (
            settings.walking_threshold_g if walking_threshold is None else walking_threshold
        )
        self.running_threshold = (
            settings.running_threshold_g if running_threshold is None else running_threshold
        )
        self.max_abs_acceleration = (
            settings.max_abs_acceleration_g
            if max_abs_acceleration is None
            else max_abs_acceleration
        )
        self.reset()

    def reset(self) -> None:
        """Return to the initial state: empty window, no step seen, at rest."""
        self.magnitudes: deque = deque(maxlen=self.window_size)
        self.last_step_ms: Optional[float] = None
        self.activity = ActivityLabel.REST
        self.samples_ingested = 0
        self.samples_dropped = 0
        self.steps_detected = 0

    def ingest(self, sample: AccelerometerSample) -> MotionResult:
        """Add a new sample, detect a step and classify the current activity."""
        if not self._is_valid(sample):
            self.samples_dropped += 1
            logger.debug(
                "Dropped invalid accelerometer sample",
                x=sample.x,
                y=sample.y,
                z=sample.z,
            )
            return MotionResult(activity=self.activity, accepted=False)

        now = self._sample_time_ms(sample)
        self.samples_ingested += 1

        magnitude = float(np.sqrt(sample.x**2 + sample.y**2 + sample.z**2))
        self.magnitudes.append(magnitude)
        smoothed = float(np.mean(self.magnitudes))

        step_detected = False
        if magnitude > self.step_threshold and (
            self.last_step_ms is None or now - self.last_step_ms > self.debounce_ms
        ):
            self.last_step_ms = now
            self.steps_detected += 1
            step_detected = True

        self.activity = self._classify_activity(now, smoothed)

        if step_detected:
            logger.debug(
                "Step detected",
                magnitude=round(magnitude, 3),
                activity=self.activity.value,
                total=self.steps_detected,
            )

        return MotionResult(
            activity=self.activity,
            step_detected=step_detected,
            magnitude=magnitude,
            smoothed_magnitude=smoothed,
        )

    def _sample_time_ms(self, sample: AccelerometerSample) -> float:
        """Sample time in ms: its own timestamp when present, else the clock.

        Naive timestamps are taken as UTC. A stream should either carry
        timestamps on every sample or on none of them.
        """
        if sample.timestamp is None:
            return self.clock.monotonic_ms()
        timestamp = sample.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return (timestamp - _EPOCH) / timedelta(milliseconds=1)

    def _is_valid(self, sample: AccelerometerSample) -> bool:
        """Reject non-finite or physically implausible components."""
        components = np.array([sample.x, sample.y, sample.z], dtype=float)
        if not np.all(np.isfinite(components)):
            return False
        return bool(np.all(np.abs(components) <= self.max_abs_acceleration))

    def _classify_activity(self, now: float, smoothed: float) -> ActivityLabel:
        """Classify activity from step recency and the smoothed magnitude."""
        recent_step = (
            self.last_step_ms is not None and now - self.last_step_ms < self.recent_step_ms
        )

        # A fresh step outranks the average, which lags into the trough between footfalls
        if recent_step:
            if smoothed >= self.running_threshold:
                return ActivityLabel.RUNNING
            return ActivityLabel.WALKING

        if smoothed >= self.running_threshold:
            return ActivityLabel.RUNNING
        elif self.walking_threshold < smoothed < self.running_threshold:
            return ActivityLabel.WALKING
        else:
            return ActivityLabel.REST
