"""Prometheus metrics for the tracker."""

from prometheus_client import Counter, Gauge

SAMPLES_INGESTED = Counter(
    "stepmaster_samples_ingested_total", "Accelerometer samples accepted by the step detector"
)
SAMPLES_DROPPED = Counter(
    "stepmaster_samples_dropped_total", "Accelerometer samples rejected as invalid"
)
STEPS_DETECTED = Counter("stepmaster_steps_detected_total", "Steps detected")
ACTIVITY_CHANGES = Counter(
    "stepmaster_activity_changes_total", "Activity label transitions", ["activity"]
)
TODAY_STEPS = Gauge("stepmaster_today_steps", "Steps recorded for the current day")
