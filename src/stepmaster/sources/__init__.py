"""Sensor and history collaborators."""

from stepmaster.sources.history import (
    HistoryDocument,
    HistoryReader,
    HistoryStore,
    InMemoryHistoryStore,
    JsonFileHistoryStore,
)
from stepmaster.sources.sensor import (
    ManualSensorSource,
    NullSensorSource,
    SensorSource,
    Subscription,
)

__all__ = [
    "HistoryDocument",
    "HistoryReader",
    "HistoryStore",
    "InMemoryHistoryStore",
    "JsonFileHistoryStore",
    "ManualSensorSource",
    "NullSensorSource",
    "SensorSource",
    "Subscription",
]
