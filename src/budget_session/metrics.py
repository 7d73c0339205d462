"""OpenTelemetry session metrics."""

from __future__ import annotations

from opentelemetry import metrics

_meter = metrics.get_meter("budget_session", version="0.1.0")

session_issued_total = _meter.create_counter(
    name="session_issued_total",
    description="Total number of sessions issued",
    unit="1",
)

session_validated_total = _meter.create_counter(
    name="session_validated_total",
    description="Total number of successful session validations",
    unit="1",
)

session_rejected_total = _meter.create_counter(
    name="session_rejected_total",
    description="Total number of rejected session tokens",
    unit="1",
)

session_revoked_total = _meter.create_counter(
    name="session_revoked_total",
    description="Total number of sessions revoked",
    unit="1",
)

session_swept_total = _meter.create_counter(
    name="session_swept_total",
    description="Total number of expired sessions removed by sweeps",
    unit="1",
)
