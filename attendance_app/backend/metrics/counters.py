import logging
from typing import Tuple

from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, CollectorRegistry, Counter, generate_latest

logger = logging.getLogger(__name__)

# The default registry already carries the process, platform and GC collectors.
ATTENDANCE_EVENTS = Counter(
    "attendance_events",
    "Total attendance events recorded",
    labelnames=["status"],
)


class AttendanceEventCounter:
    """
    Best-effort side channel for counting recorded attendance events.

    ``increment`` never raises: a broken metrics backend must not change the
    outcome of the request that triggered it.
    """
    def __init__(self, counter: Counter = ATTENDANCE_EVENTS):
        self._counter = counter

    def increment(self, status: str) -> None:
        try:
            self._counter.labels(status=status).inc()
        except Exception:
            logger.debug(f"Attendance counter increment failed for status '{status}'.", exc_info=True)


def render_metrics(registry: CollectorRegistry = REGISTRY) -> Tuple[bytes, str]:
    """Returns the text exposition of every registered metric and its content type."""
    return generate_latest(registry), CONTENT_TYPE_LATEST
