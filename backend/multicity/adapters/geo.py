"""Great-circle distance between coordinates."""

import math

from backend.multicity.models.city import CityDestination
from backend.multicity.models.common import Geo

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Geo, b: Geo) -> float:
    """Haversine distance in kilometers on a spherical Earth.

    Symmetric, and 0 for identical coordinates.
    """
    lat1, lon1 = math.radians(a.lat), math.radians(a.lon)
    lat2, lon2 = math.radians(b.lat), math.radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.asin(math.sqrt(min(1.0, h)))
    return EARTH_RADIUS_KM * c


def city_distance_km(from_city: CityDestination, to_city: CityDestination) -> float:
    """Distance between two cities' coordinates."""
    return haversine_km(from_city.coordinates, to_city.coordinates)
