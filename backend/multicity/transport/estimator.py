"""Per-mode travel time, cost and carbon estimates.

All three estimates are pure functions of the great-circle distance, the
mode and the party size.
"""

import math

from backend.multicity.adapters.geo import city_distance_km
from backend.multicity.config import Settings, get_settings
from backend.multicity.models.city import CityDestination
from backend.multicity.models.common import CarbonFootprint, Money, TransportMode
from backend.multicity.models.preferences import TravelerInfo

# Average speed (km/h)
SPEED_KMH: dict[TransportMode, float] = {
    TransportMode.flight: 800.0,
    TransportMode.train: 200.0,
    TransportMode.bus: 80.0,
    TransportMode.ferry: 40.0,
    TransportMode.car_rental: 100.0,
    TransportMode.private_transfer: 100.0,
}

# Variable cost per km per fare-paying passenger
COST_PER_KM: dict[TransportMode, float] = {
    TransportMode.flight: 0.15,
    TransportMode.train: 0.08,
    TransportMode.bus: 0.04,
    TransportMode.ferry: 0.06,
    TransportMode.car_rental: 0.12,
    TransportMode.private_transfer: 0.25,
}

# Fixed cost per fare-paying passenger
FIXED_COST: dict[TransportMode, float] = {
    TransportMode.flight: 50.0,
    TransportMode.train: 20.0,
    TransportMode.bus: 10.0,
    TransportMode.ferry: 15.0,
    TransportMode.car_rental: 30.0,
    TransportMode.private_transfer: 40.0,
}

# kg CO2 per km per passenger
CARBON_PER_KM: dict[TransportMode, float] = {
    TransportMode.flight: 0.255,
    TransportMode.train: 0.041,
    TransportMode.bus: 0.089,
    TransportMode.ferry: 0.115,
    TransportMode.car_rental: 0.171,
    TransportMode.private_transfer: 0.171,
}

# Terminal/boarding time added after the in-motion time (minutes)
MODE_OVERHEAD_MIN: dict[TransportMode, int] = {
    TransportMode.flight: 180,
    TransportMode.train: 30,
    TransportMode.bus: 20,
    TransportMode.ferry: 60,
}


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for non-negative values (2.5 -> 3)."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def travel_minutes(distance_km: float, mode: TransportMode) -> int:
    """Door-to-door minutes for a distance, overhead included."""
    in_motion = distance_km / SPEED_KMH[mode] * 60
    return int(round_half_up(in_motion + MODE_OVERHEAD_MIN.get(mode, 0)))


def estimate_travel_time(
    from_city: CityDestination, to_city: CityDestination, mode: TransportMode
) -> int:
    """Estimated travel time in minutes between two cities."""
    return travel_minutes(city_distance_km(from_city, to_city), mode)


def estimate_cost(
    from_city: CityDestination,
    to_city: CityDestination,
    mode: TransportMode,
    travelers: TravelerInfo,
    settings: Settings | None = None,
) -> Money:
    """Estimated fare for the whole party, in the reporting currency; infants travel free."""
    settings = settings or get_settings()
    distance = city_distance_km(from_city, to_city)
    per_passenger = FIXED_COST[mode] + distance * COST_PER_KM[mode]
    amount = int(round_half_up(per_passenger * travelers.fare_paying))
    return Money(amount=amount, currency=settings.reporting_currency)


def estimate_carbon(
    from_city: CityDestination,
    to_city: CityDestination,
    mode: TransportMode,
    travelers: TravelerInfo,
) -> CarbonFootprint:
    """Estimated CO2 for the whole party, infants included, to 0.1 kg."""
    distance = city_distance_km(from_city, to_city)
    kg = distance * CARBON_PER_KM[mode] * travelers.total
    return CarbonFootprint(kg_co2=round_half_up(kg, 1))


def format_duration(minutes: int) -> str:
    """Human-readable duration: "45m", "3h", "2h 5m"."""
    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"
