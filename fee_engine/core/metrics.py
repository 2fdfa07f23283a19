"""Prometheus metrics for the payment refresh loop.

Metrics:
- fee_engine_refresh_total: Snapshot refreshes by status (success, failure)
- fee_engine_refresh_skipped_total: Refreshes rejected while one was in flight
- fee_engine_refresh_latency_seconds: Snapshot fetch latency
- fee_engine_polling_active: 1 while a refresh loop is running
- fee_engine_open_payments: Open (pending/active) payments in the last snapshot
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


refresh_total = Counter(
    "fee_engine_refresh_total",
    "Total number of payment snapshot refreshes",
    ["status"],  # success, failure
)

refresh_skipped = Counter(
    "fee_engine_refresh_skipped_total",
    "Refreshes skipped because another refresh was in flight",
)

refresh_latency = Histogram(
    "fee_engine_refresh_latency_seconds",
    "Payment snapshot fetch latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

polling_active = Gauge(
    "fee_engine_polling_active",
    "Whether a refresh loop is currently running (0 or 1)",
)

open_payments = Gauge(
    "fee_engine_open_payments",
    "Pending or active payments in the most recent snapshot",
)


@contextmanager
def track_refresh_latency() -> Generator[None, None, None]:
    """Context manager to track snapshot fetch latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        refresh_latency.observe(duration)


def record_refresh_success(open_count: int) -> None:
    """Record a successful refresh and the open payments it returned."""
    refresh_total.labels(status="success").inc()
    open_payments.set(open_count)


def record_refresh_failure() -> None:
    """Record a failed refresh."""
    refresh_total.labels(status="failure").inc()


def record_refresh_skipped() -> None:
    """Record a refresh rejected by the single-flight guard."""
    refresh_skipped.inc()


def set_polling_active(active: bool) -> None:
    """Flag whether the refresh loop is running."""
    polling_active.set(1 if active else 0)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
