"""Structured logging for orchestrator operations and leg searches."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredTripLogger:
    """Structured logger for trip operations."""

    def log_operation(
        self,
        operation: str,
        outcome: str,
        latency_ms: float,
        trip_id: str | None = None,
        warnings: int = 0,
        error_reason: str | None = None,
    ) -> None:
        """Log one orchestrator operation with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
            "trip_id": trip_id,
            "warnings": warnings,
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Trip operation: {operation} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})

    def log_leg(
        self,
        leg_index: int,
        from_city: str,
        to_city: str,
        outcome: str,
        mode: str | None = None,
        duration: str | None = None,
    ) -> None:
        """Log the planning outcome of one transition."""
        log_data: dict[str, Any] = {
            "leg_index": leg_index,
            "from_city": from_city,
            "to_city": to_city,
            "outcome": outcome,
        }
        if mode:
            log_data["mode"] = mode
        if duration:
            log_data["duration"] = duration

        log_msg = f"Leg {leg_index}: {from_city} -> {to_city} - {outcome}"

        if outcome == "selected":
            logger.debug(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
