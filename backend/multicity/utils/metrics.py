"""Metrics for orchestrator operations - no-op interface and Prometheus implementation."""

from prometheus_client import Counter, Histogram

trip_operation_latency_ms = Histogram(
    "trip_operation_latency_ms",
    "Orchestrator operation latency in milliseconds",
    ["operation", "outcome"],
    buckets=[1, 5, 10, 50, 100, 250, 500, 1000, 4000],
)

trip_operations_total = Counter(
    "trip_operations_total",
    "Total orchestrator operations",
    ["operation", "outcome"],
)

placeholder_legs_total = Counter(
    "placeholder_legs_total",
    "Transitions filled with an estimated placeholder leg",
    ["reason"],
)


class TripMetrics:
    """Interface for orchestrator metrics (defaults to no-op)."""

    def record_operation(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record one operation and its latency."""
        pass

    def inc_placeholder(self, reason: str) -> None:
        """Increment placeholder leg counter."""
        pass


class PrometheusTripMetrics(TripMetrics):
    """Prometheus-based orchestrator metrics."""

    def record_operation(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record one operation and its latency."""
        trip_operations_total.labels(operation=operation, outcome=outcome).inc()
        trip_operation_latency_ms.labels(operation=operation, outcome=outcome).observe(latency_ms)

    def inc_placeholder(self, reason: str) -> None:
        """Increment placeholder leg counter."""
        placeholder_legs_total.labels(reason=reason).inc()
