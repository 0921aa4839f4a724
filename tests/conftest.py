"""Global test configuration and fixtures."""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from stepmaster.main import create_app
from stepmaster.motion import AccelerometerSample, StepDetector
from stepmaster.sources import InMemoryHistoryStore, ManualSensorSource
from stepmaster.tracker import ActivityTracker

# A Friday; the 16th and 17th are a weekend
TODAY = date(2024, 3, 15)


class FakeClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, start_ms: float = 10_000.0, today: date = TODAY):
        self.now_ms = start_ms
        self.current_day = today

    def monotonic_ms(self) -> float:
        return self.now_ms

    def today(self) -> date:
        return self.current_day

    def advance(self, ms: float) -> None:
        self.now_ms += ms


def sample(magnitude: float) -> AccelerometerSample:
    """Sample pointing straight down with the given magnitude."""
    return AccelerometerSample(x=0.0, y=0.0, z=magnitude)


def days_ago(n: int, today: date = TODAY) -> str:
    return (today - timedelta(days=n)).isoformat()


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def detector(clock):
    return StepDetector(clock=clock)


@pytest.fixture
def store():
    return InMemoryHistoryStore()


@pytest.fixture
def sensor():
    return ManualSensorSource()


@pytest.fixture
def tracker(sensor, store, clock):
    return ActivityTracker(sensor=sensor, store=store, clock=clock)


@pytest.fixture
def client(tracker):
    """Test client around an in-memory tracker, with lifespan started."""
    app = create_app(tracker)
    with TestClient(app) as client:
        yield client
