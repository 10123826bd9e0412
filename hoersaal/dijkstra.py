"""Road maps of cities and streets, and shortest-path search over them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

City = str
Street = tuple[str, str]


@dataclass
class RoadMap:
    """Cities with positions, joined by streets.

    A city is identified by its name. A street is a pair of city names.
    Every street must join two cities that are on the map.
    """

    cities: dict[City, tuple[float, float]] = field(default_factory=dict)
    streets: list[Street] = field(default_factory=list)

    def __post_init__(self) -> None:
        for street in self.streets:
            first, second = street
            for name in (first, second):
                if name not in self.cities:
                    raise ValueError(
                        f"street {street!r} refers to unknown city {name!r}"
                    )

    def find_city(self, name: str) -> Optional[City]:
        """Return the city called ``name``, or None if it is not on the map."""
        return name if name in self.cities else None

    def street_list(self, city: City) -> list[Street]:
        """Return every street that touches ``city``, in map order."""
        return [street for street in self.streets if city in street]

    def opposite_city(self, street: Optional[Street], city: City) -> Optional[City]:
        """Return the other end of ``street``, or None if ``city`` is not on it."""
        if street is None:
            return None
        first, second = street
        if first == city:
            return second
        if second == city:
            return first
        return None

    def length(self, street: Street) -> float:
        """Return the straight-line distance between the street's cities."""
        (x1, y1), (x2, y2) = (self.cities[name] for name in street)
        return math.hypot(x2 - x1, y2 - y1)


@dataclass(eq=False)
class _Entry:
    city: City
    distance: float
    street: Optional[Street]


def search(road_map: RoadMap, start: str, target: str) -> list[Street]:
    """Return the streets of a shortest path from ``start`` to ``target``.

    The list is empty when the cities are not connected or are the same
    city. Raises :class:`KeyError` if either city is not on the map.
    """
    start_city = road_map.find_city(start)
    target_city = road_map.find_city(target)
    if start_city is None or target_city is None:
        missing = start if start_city is None else target
        raise KeyError(f"city not found: {missing!r}")

    finished: dict[City, _Entry] = {}
    pending: dict[City, _Entry] = {start_city: _Entry(start_city, 0.0, None)}

    while pending:
        current = min(pending.values(), key=lambda entry: entry.distance)
        del pending[current.city]
        finished[current.city] = current

        for street in road_map.street_list(current.city):
            neighbour = road_map.opposite_city(street, current.city)
            if neighbour is None:
                continue
            distance = current.distance + road_map.length(street)
            known = finished.get(neighbour) or pending.get(neighbour)
            if known is None:
                pending[neighbour] = _Entry(neighbour, distance, street)
            elif distance < known.distance:
                known.distance = distance
                known.street = street

    entry = finished.get(target_city)
    if entry is None or entry.street is None:
        return []

    path: list[Street] = []
    city: Optional[City] = target_city
    while city != start_city:
        entry = finished[city]
        path.append(entry.street)
        city = road_map.opposite_city(entry.street, city)
    path.reverse()
    return path