"""Bounded progress ratios."""

import math


def progress_ratio(value: float, target: float) -> float:
    """Return value/target clamped to [0, 1].

    A target that is not a positive finite number has no meaningful progress
    and yields 0, as does a non-finite value.
    """
    if not math.isfinite(target) or target <= 0:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return max(0.0, min(value / target, 1.0))
