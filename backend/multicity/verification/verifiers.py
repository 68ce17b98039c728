"""Advisory checks over a built trip: budget, transit length, night slack."""

from datetime import date

from backend.multicity.models.preferences import MultiCityPreferences
from backend.multicity.models.transport import InterCityLeg
from backend.multicity.models.trip import CityStop, MultiCityTripStats
from backend.multicity.models.violations import Violation, ViolationKind, ViolationSeverity

LONG_TRANSIT_MINUTES = 6 * 60


def verify_transport_budget(
    preferences: MultiCityPreferences, stats: MultiCityTripStats
) -> list[Violation]:
    """Check estimated transport cost against the transport share of the budget.

    Args:
        preferences: Trip preferences with total_budget and transport_budget_percent
        stats: Computed trip stats

    Returns:
        List with one advisory violation if over budget, else empty
    """
    budget = preferences.total_budget
    percent = preferences.transport_budget_percent
    if budget is None or percent is None:
        return []

    transport_budget = budget.amount * percent / 100
    cost = stats.estimated_transport_cost.amount
    if cost <= transport_budget:
        return []

    return [
        Violation(
            kind=ViolationKind.BUDGET,
            code="OVER_TRANSPORT_BUDGET",
            message=(
                f"Estimated transport cost {cost} {stats.estimated_transport_cost.currency} "
                f"exceeds the transport budget of {round(transport_budget)}."
            ),
            severity=ViolationSeverity.ADVISORY,
            details={
                "estimated_cost": cost,
                "transport_budget": round(transport_budget, 2),
                "transport_budget_percent": percent,
            },
        )
    ]


def verify_transitions(transitions: list[InterCityLeg]) -> list[Violation]:
    """Flag placeholder legs and legs longer than 6 hours.

    Returns:
        List of ADVISORY violations (never BLOCKING)
    """
    violations: list[Violation] = []

    for leg in transitions:
        if leg.is_placeholder:
            violations.append(
                Violation(
                    kind=ViolationKind.TRANSPORT,
                    code="PLACEHOLDER_LEG",
                    message=(
                        f"No transport options found from {leg.from_city.name} to "
                        f"{leg.to_city.name}; using an estimated {leg.transport_mode.value}."
                    ),
                    severity=ViolationSeverity.ADVISORY,
                    affected_leg_ids=[leg.id],
                )
            )

    long_legs = [leg.id for leg in transitions if leg.duration_minutes > LONG_TRANSIT_MINUTES]
    if long_legs:
        violations.append(
            Violation(
                kind=ViolationKind.FEASIBILITY,
                code="LONG_TRANSIT",
                message="Some transit legs exceed 6 hours, which may be tiring.",
                severity=ViolationSeverity.ADVISORY,
                affected_leg_ids=long_legs,
                details={
                    "threshold_minutes": LONG_TRANSIT_MINUTES,
                    "num_long_legs": len(long_legs),
                },
            )
        )

    return violations


def verify_night_allocation(
    stops: list[CityStop], end_date: date, available_nights: int
) -> list[Violation]:
    """Report allocation slack: nights beyond what the date range allows.

    Clamping to per-city minimums can over-allocate; the overflow is kept
    and reported rather than redistributed.
    """
    allocated = sum(stop.nights for stop in stops)
    if allocated <= available_nights:
        return []

    last_date = stops[-1].departure_date if stops else end_date
    return [
        Violation(
            kind=ViolationKind.ALLOCATION,
            code="NIGHTS_EXCEED_AVAILABLE",
            message=(
                f"Allocated {allocated} nights but only {available_nights} fit the date range; "
                f"the trip ends on {last_date.isoformat()}."
            ),
            severity=ViolationSeverity.ADVISORY,
            details={
                "allocated_nights": allocated,
                "available_nights": available_nights,
                "requested_end_date": end_date.isoformat(),
                "planned_end_date": last_date.isoformat(),
            },
        )
    ]
