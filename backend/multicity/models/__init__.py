"""Models package - re-exports for convenience."""

from backend.multicity.models.city import AirportInfo, CityDestination, StationInfo
from backend.multicity.models.common import (
    CarbonFootprint,
    CarrierType,
    DayType,
    Geo,
    Money,
    Provenance,
    TimeWindow,
    TransportMode,
    TripStatus,
)
from backend.multicity.models.preferences import MultiCityPreferences, TravelerInfo
from backend.multicity.models.transport import (
    AnyLeg,
    BusAmenities,
    BusLeg,
    CarrierInfo,
    FlightLeg,
    InterCityLeg,
    TrainAmenities,
    TrainLeg,
    TransportSearchRequest,
    TransportSearchResult,
)
from backend.multicity.models.trip import (
    CityDaySchedule,
    CityItinerary,
    CityNightsAllocation,
    CityStop,
    MultiCityGenerationRequest,
    MultiCityResult,
    MultiCityTrip,
    MultiCityTripStats,
)

__all__ = [
    # Common
    "Geo",
    "TimeWindow",
    "Money",
    "CarbonFootprint",
    "TransportMode",
    "CarrierType",
    "DayType",
    "TripStatus",
    "Provenance",
    # Cities
    "CityDestination",
    "AirportInfo",
    "StationInfo",
    # Inputs
    "TravelerInfo",
    "MultiCityPreferences",
    "MultiCityGenerationRequest",
    # Transport
    "AnyLeg",
    "InterCityLeg",
    "FlightLeg",
    "TrainLeg",
    "BusLeg",
    "CarrierInfo",
    "TrainAmenities",
    "BusAmenities",
    "TransportSearchRequest",
    "TransportSearchResult",
    # Trip
    "CityNightsAllocation",
    "CityStop",
    "CityDaySchedule",
    "CityItinerary",
    "MultiCityTripStats",
    "MultiCityTrip",
    "MultiCityResult",
]
