"""Violation models - advisory findings attached to a generated trip."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# JSON-serializable value types for violation details
JsonValue = str | int | float | bool | None | dict[str, Any] | list[Any]


class ViolationSeverity(str, Enum):
    """Severity levels for trip findings."""

    ADVISORY = "advisory"
    BLOCKING = "blocking"


class ViolationKind(str, Enum):
    """Categories of trip checks."""

    BUDGET = "budget"
    FEASIBILITY = "feasibility"
    ALLOCATION = "allocation"
    TRANSPORT = "transport"


class Violation(BaseModel):
    """A constraint the trip does not fully satisfy.

    Surfaced to callers as a warning string; the trip is still returned.
    """

    kind: ViolationKind
    code: str  # Machine-usable short code, e.g., "OVER_TRANSPORT_BUDGET"
    message: str  # Human-readable description (1-2 sentences)
    severity: ViolationSeverity
    affected_leg_ids: list[str] = Field(default_factory=list)
    details: dict[str, JsonValue] = Field(default_factory=dict)
