"""Accelerometer sample sources."""

import threading
from typing import Callable, List, Protocol

import structlog

from stepmaster.motion.models import AccelerometerSample

logger = structlog.get_logger(__name__)

SampleCallback = Callable[[AccelerometerSample], None]


class Subscription(Protocol):
    def remove(self) -> None:
        """Stop delivery. Safe to call more than once."""
        ...


class SensorSource(Protocol):
    """Delivers accelerometer samples to subscribers at a nominal rate."""

    def subscribe(self, on_sample: SampleCallback) -> Subscription:
        ...


class _NoopSubscription:
    def remove(self) -> None:
        pass


class NullSensorSource:
    """Sensor that is not available on this platform and never delivers."""

    def subscribe(self, on_sample: SampleCallback) -> Subscription:
        logger.info("Accelerometer unavailable, no samples will be delivered")
        return _NoopSubscription()


class _CallbackSubscription:
    def __init__(self, source: "ManualSensorSource", callback: SampleCallback):
        self._source = source
        self._callback = callback
        self._removed = False

    def remove(self) -> None:
        if self._removed:
            return
        self._removed = True
        self._source._unsubscribe(self._callback)


class ManualSensorSource:
    """Sensor driven by the caller, e.g. an HTTP endpoint or a replay."""

    def __init__(self):
        self._callbacks: List[SampleCallback] = []
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, on_sample: SampleCallback) -> Subscription:
        with self._lock:
            self._callbacks.append(on_sample)
        return _CallbackSubscription(self, on_sample)

    def _unsubscribe(self, callback: SampleCallback) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def push(self, sample: AccelerometerSample) -> int:
        """Deliver a sample to every subscriber; returns how many received it."""
        with self._lock:
            callbacks = list(self._callbacks)
        for callback in callbacks:
            callback(sample)
        return len(callbacks)
