"""Wires a sensor, the step detector and the history store together."""

import threading
from datetime import date
from typing import Callable, Optional

import structlog

from stepmaster import metrics
from stepmaster.clock import Clock, SystemClock
from stepmaster.motion import AccelerometerSample, ActivityLabel, MotionResult, StepDetector
from stepmaster.progress import DailyStats, ProgressReport, build_progress_report, get_daily_stats
from stepmaster.sources import HistoryStore, SensorSource, Subscription

logger = structlog.get_logger(__name__)


class ActivityTracker:
    """Consumes accelerometer samples and keeps today's step total up to date.

    Sample delivery is serialized with a lock, so a sensor may call back from
    any thread. Each detected step increments today's stored total by one.
    """

    def __init__(
        self,
        sensor: SensorSource,
        store: HistoryStore,
        detector: Optional[StepDetector] = None,
        clock: Optional[Clock] = None,
        on_activity_change: Optional[Callable[[ActivityLabel], None]] = None,
        on_step: Optional[Callable[[int], None]] = None,
    ):
        self.sensor = sensor
        self.store = store
        self.clock = clock or SystemClock()
        self.detector = detector or StepDetector(clock=self.clock)
        self.on_activity_change = on_activity_change
        self.on_step = on_step
        self._subscription: Optional[Subscription] = None
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._subscription is not None

    @property
    def activity(self) -> ActivityLabel:
        return self.detector.activity

    def start(self) -> None:
        """Subscribe to the sensor."""
        if self.running:
            return
        self._subscription = self.sensor.subscribe(self.process_sample)
        today = self.clock.today()
        metrics.TODAY_STEPS.set(self.store.get_today_steps(today))
        logger.info("Started activity tracker", date=today.isoformat())

    def stop(self) -> None:
        """Unsubscribe from the sensor. Safe to call more than once."""
        if self._subscription is None:
            return
        self._subscription.remove()
        self._subscription = None
        logger.info(
            "Stopped activity tracker",
            samples=self.detector.samples_ingested,
            dropped=self.detector.samples_dropped,
            steps=self.detector.steps_detected,
        )

    def process_sample(self, sample: AccelerometerSample) -> MotionResult:
        """Run one sample through the detector and record any step."""
        with self._lock:
            previous = self.detector.activity
            result = self.detector.ingest(sample)

            if not result.accepted:
                metrics.SAMPLES_DROPPED.inc()
                return result
            metrics.SAMPLES_INGESTED.inc()

            steps = None
            if result.step_detected:
                today = self.clock.today()
                steps = self.store.get_today_steps(today) + 1
                try:
                    self.store.save_daily_steps(today, steps)
                except OSError as e:
                    # The stored total is unchanged; the detector still debounces on this step
                    logger.error("Failed to save step", date=today.isoformat(), error=str(e))
                    raise
                metrics.STEPS_DETECTED.inc()
                metrics.TODAY_STEPS.set(steps)

            if result.activity != previous:
                metrics.ACTIVITY_CHANGES.labels(activity=result.activity.value).inc()
                logger.info(
                    "Activity changed", previous=previous.value, activity=result.activity.value
                )

        if steps is not None and self.on_step:
            self.on_step(steps)
        if result.activity != previous and self.on_activity_change:
            self.on_activity_change(result.activity)

        return result

    def today_steps(self) -> int:
        return self.store.get_today_steps(self.clock.today())

    def add_water(self, change: int) -> int:
        """Adjust today's water count by ``change`` glasses, never below zero."""
        today = self.clock.today()
        with self._lock:
            return self.store.save_water(today, self.store.get_water(today) + change)

    def reset_today(self) -> date:
        """Clear today's steps and water intake."""
        today = self.clock.today()
        with self._lock:
            self.store.save_daily_steps(today, 0)
            self.store.save_water(today, 0)
        metrics.TODAY_STEPS.set(0)
        logger.info("Reset today's data", date=today.isoformat())
        return today

    def progress_report(self) -> ProgressReport:
        today = self.clock.today()
        return build_progress_report(
            history=self.store.get_history(),
            goal=self.store.get_goal(),
            today_steps=self.store.get_today_steps(today),
            today=today,
        )

    def daily_stats(self) -> DailyStats:
        today = self.clock.today()
        return get_daily_stats(
            today=today,
            steps=self.store.get_today_steps(today),
            goal=self.store.get_goal(),
            water_glasses=self.store.get_water(today),
        )

    def status(self) -> dict:
        return {
            "running": self.running,
            "activity": self.activity.value,
            "samples_ingested": self.detector.samples_ingested,
            "samples_dropped": self.detector.samples_dropped,
            "steps_detected": self.detector.steps_detected,
            "today_steps": self.today_steps(),
        }
