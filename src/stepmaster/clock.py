"""Time sources for the motion engine and the progress analytics."""

import time
from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of "now" for step timing and of "today" for daily analytics."""

    def monotonic_ms(self) -> float:
        """Milliseconds from an arbitrary, never-decreasing origin."""
        ...

    def today(self) -> date:
        """Current calendar day."""
        ...


class SystemClock:
    """Clock backed by the process monotonic timer and the UTC calendar."""

    def monotonic_ms(self) -> float:
        return time.monotonic() * 1000.0

    def today(self) -> date:
        # History keys are UTC calendar days
        return datetime.now(timezone.utc).date()
