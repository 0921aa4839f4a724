"""Readiness checks over a running tracker."""

from typing import Callable, List, Optional, Tuple

import structlog
from pydantic import BaseModel

from stepmaster.tracker import ActivityTracker

logger = structlog.get_logger(__name__)


class CheckResult(BaseModel):
    name: str
    healthy: bool
    detail: Optional[str] = None


class Readiness(BaseModel):
    ready: bool
    checks: List[CheckResult]


def _tracker_running(tracker: ActivityTracker) -> Tuple[bool, Optional[str]]:
    if tracker.running:
        return True, None
    return False, "not subscribed to a sensor"


def _history_writable(tracker: ActivityTracker) -> Tuple[bool, Optional[str]]:
    if tracker.store.writable():
        return True, None
    return False, "history store is read-only"


CHECKS: List[Tuple[str, Callable[[ActivityTracker], Tuple[bool, Optional[str]]]]] = [
    ("tracker", _tracker_running),
    ("history", _history_writable),
]


def check_readiness(tracker: Optional[ActivityTracker]) -> Readiness:
    """Run every check against ``tracker``; no tracker means nothing is ready."""
    if tracker is None:
        checks = [CheckResult(name=name, healthy=False, detail="no tracker") for name, _ in CHECKS]
        return Readiness(ready=False, checks=checks)

    checks = []
    for name, check in CHECKS:
        try:
            healthy, detail = check(tracker)
        except OSError as e:
            healthy, detail = False, str(e)
        if not healthy:
            logger.warning("Readiness check failed", check=name, detail=detail)
        checks.append(CheckResult(name=name, healthy=healthy, detail=detail))

    return Readiness(ready=all(c.healthy for c in checks), checks=checks)
