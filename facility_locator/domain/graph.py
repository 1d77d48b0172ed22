"""
Road network: an undirected, distance-weighted graph of locations.

Structure
---------
* ``_adjacency``  Location -> ordered list of outgoing ``Road`` objects.
  An undirected road A-B is stored as two ``Road`` entries, one in each
  endpoint's list, carrying the same weight.
* ``_order``      Location -> insertion index.  Used as the deterministic
  tie-breaker by the shortest-path engine and the selector.
* ``_by_name``    name -> Location.  Backs ``find_hub`` / ``get`` so name
  lookups do not scan the whole graph.

The graph only grows: there are no removal or update operations.

Concurrency
-----------
Mutations take the network's write lock.  Read accessors do **not** lock;
a caller that needs a consistent view across several reads (a whole
Dijkstra run, for instance) wraps them in ``with network.reading():``.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Sequence

from facility_locator.infrastructure.locks import ReadWriteLock

from .distance import haversine_km
from .entities import DuplicateLocationError, Location, Road, UnknownNodeError
from .enums import LocationCategory


class RoadNetwork:
    def __init__(self) -> None:
        self._adjacency: dict[Location, list[Road]] = {}
        self._order: dict[Location, int] = {}
        self._by_name: dict[str, Location] = {}
        self._road_count = 0
        self._lock = ReadWriteLock()

    # ── Mutation ─────────────────────────────────────────────────────

    def add_location(self, location: Location) -> bool:
        """Insert *location* with no roads.

        Re-adding the same object is a no-op and returns False.  A
        different object whose name is already taken raises
        ``DuplicateLocationError``.
        """
        with self._lock.write_locked():
            return self._insert(location)

    def add_road(self, a: Location, b: Location) -> float:
        """Connect *a* and *b* in both directions; return the weight in km.

        Calling this twice for the same pair adds a parallel road.
        """
        with self._lock.write_locked():
            return self._connect(a, b)

    def attach(self, location: Location, to: Location) -> float:
        """Insert *location* and its road to *to* as one atomic write."""
        with self._lock.write_locked():
            if to not in self._adjacency:
                raise UnknownNodeError(f"Location not in network: {to.name!r}")
            self._insert(location)
            return self._connect(location, to)

    def _insert(self, location: Location) -> bool:
        if location in self._adjacency:
            return False
        existing = self._by_name.get(location.name)
        if existing is not None:
            raise DuplicateLocationError(
                f"A different location named {location.name!r} already exists"
            )
        self._order[location] = len(self._order)
        self._adjacency[location] = []
        self._by_name[location.name] = location
        return True

    def _connect(self, a: Location, b: Location) -> float:
        for endpoint in (a, b):
            if endpoint not in self._adjacency:
                raise UnknownNodeError(f"Location not in network: {endpoint.name!r}")

        weight = haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
        self._adjacency[a].append(Road(b, weight))
        self._adjacency[b].append(Road(a, weight))
        self._road_count += 1
        return weight

    # ── Reads ────────────────────────────────────────────────────────

    @contextmanager
    def reading(self) -> Iterator["RoadNetwork"]:
        """Hold the shared lock so no mutation interleaves with the reads."""
        with self._lock.read_locked():
            yield self

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, location: object) -> bool:
        return location in self._adjacency

    @property
    def road_count(self) -> int:
        """Number of undirected roads (parallel roads counted separately)."""
        return self._road_count

    def locations(self) -> list[Location]:
        """All locations in insertion order."""
        return list(self._adjacency)

    def roads_from(self, location: Location) -> Sequence[Road]:
        try:
            return self._adjacency[location]
        except KeyError:
            raise UnknownNodeError(
                f"Location not in network: {location.name!r}"
            ) from None

    def insertion_index(self, location: Location) -> int:
        return self._order[location]

    def get(self, name: str) -> Optional[Location]:
        return self._by_name.get(name)

    def find(self, predicate: Callable[[Location], bool]) -> Optional[Location]:
        """First location (in insertion order) satisfying *predicate*."""
        return next((loc for loc in self._adjacency if predicate(loc)), None)

    def find_hub(self, name: str) -> Optional[Location]:
        loc = self._by_name.get(name)
        if loc is not None and loc.category == LocationCategory.HUB:
            return loc
        return None

    def hubs(self) -> list[Location]:
        return [
            loc for loc in self._adjacency if loc.category == LocationCategory.HUB
        ]
