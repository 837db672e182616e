from unittest.mock import MagicMock

from prometheus_client import CollectorRegistry, Counter

from attendance_app.backend.metrics.counters import AttendanceEventCounter, render_metrics


def test_increment_counts_per_status():
    registry = CollectorRegistry()
    counter = Counter("attendance_events", "Total attendance events recorded", labelnames=["status"], registry=registry)
    events = AttendanceEventCounter(counter)

    events.increment("present")
    events.increment("present")
    events.increment("absent")

    assert registry.get_sample_value("attendance_events_total", {"status": "present"}) == 2
    assert registry.get_sample_value("attendance_events_total", {"status": "absent"}) == 1


def test_increment_swallows_failures():
    broken = MagicMock()
    broken.labels.return_value.inc.side_effect = ValueError("boom")

    AttendanceEventCounter(broken).increment("present")

    broken.labels.assert_called_once_with(status="present")


def test_render_metrics_uses_given_registry():
    registry = CollectorRegistry()
    Counter("sample_events", "Sample", registry=registry).inc()

    payload, content_type = render_metrics(registry)

    assert b"sample_events_total 1.0" in payload
    assert content_type.startswith("text/plain")
