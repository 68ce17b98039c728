"""City sequencing - nearest-neighbor approximation of the visiting order.

Not an optimal TSP solver: trips are small (typically 2-8 cities), where
nearest-neighbor gives a reasonable route at negligible cost.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, field

from backend.multicity.adapters.geo import city_distance_km
from backend.multicity.models.city import CityDestination

DistanceFn = Callable[[CityDestination, CityDestination], float]


@dataclass(frozen=True)
class CitySequence:
    """Visiting order produced by the sequencer.

    `complete` is False when the walk stopped before placing every city;
    callers must not treat such a path as a full itinerary.
    """

    cities: list[CityDestination]
    expected_count: int
    total_distance_km: float = 0.0
    skipped: list[CityDestination] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return len(self.cities) == self.expected_count


def build_distance_matrix(
    cities: list[CityDestination], distance_fn: DistanceFn = city_distance_km
) -> list[list[float]]:
    """N x N distance matrix with a zero diagonal."""
    n = len(cities)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i != j:
                matrix[i][j] = distance_fn(cities[i], cities[j])
    return matrix


def _index_of(cities: list[CityDestination], city: CityDestination) -> int:
    for i, candidate in enumerate(cities):
        if candidate.id == city.id:
            return i
    return -1


def sequence_cities(
    cities: list[CityDestination],
    start_city: CityDestination,
    end_city: CityDestination | None = None,
    distance_fn: DistanceFn = city_distance_km,
) -> CitySequence:
    """Order cities by repeatedly visiting the nearest unvisited one.

    Args:
        cities: Cities to visit (duplicates by id are ignored)
        start_city: First city; added to the candidates if missing
        end_city: Optional last city; added if missing. Withheld from the walk
            until it is the only city left. Equal to start_city means a round
            trip, which is the unconstrained walk.
        distance_fn: Pairwise distance; non-finite distances mark unreachable pairs

    Returns:
        CitySequence; shorter than the candidate list if the walk got stuck
    """
    candidates: list[CityDestination] = []
    for city in cities:
        if _index_of(candidates, city) < 0:
            candidates.append(city)

    if _index_of(candidates, start_city) < 0:
        candidates.insert(0, start_city)
    if end_city is not None and _index_of(candidates, end_city) < 0:
        candidates.append(end_city)

    n = len(candidates)
    distances = build_distance_matrix(candidates, distance_fn)

    start_idx = _index_of(candidates, start_city)
    end_idx = _index_of(candidates, end_city) if end_city is not None else start_idx

    path = [start_idx]
    visited = {start_idx}
    current = start_idx
    total_km = 0.0

    while len(path) < n:
        nearest_dist = math.inf
        nearest_idx = -1

        for i in range(n):
            if i in visited:
                continue
            # End city waits until it is the last one left
            if i == end_idx and len(path) < n - 1:
                continue
            if distances[current][i] < nearest_dist:
                nearest_dist = distances[current][i]
                nearest_idx = i

        if nearest_idx < 0:
            break

        path.append(nearest_idx)
        visited.add(nearest_idx)
        total_km += nearest_dist
        current = nearest_idx

    return CitySequence(
        cities=[candidates[i] for i in path],
        expected_count=n,
        total_distance_km=total_km,
        skipped=[candidates[i] for i in range(n) if i not in visited],
    )
