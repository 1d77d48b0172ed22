"""
Single-source shortest paths (Dijkstra) over the road network.

Frontier
--------
A binary heap (``heapq``) with **lazy deletion**: when a location's
tentative distance improves, a new ``(distance, insertion_index, location)``
entry is pushed and the old one stays in the heap.  Popping an entry whose
distance is worse than the recorded one means it is stale, and it is
skipped.  Each relaxation is O(log E); no linear removal is ever needed.

The insertion index is the secondary key, so equal distances always
settle in the order locations were added to the network.

Overlay
-------
A ``QueryOverlay`` adds one virtual location and one virtual undirected
road (to an existing *anchor*) for the duration of a single run.  The
shared network is never written to, so concurrent queries never see each
other's query points.

Complexity: O((V + E) log V).
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .distance import haversine_km
from .entities import Location, UnknownNodeError, UnknownOriginError
from .graph import RoadNetwork

UNREACHABLE = math.inf


@dataclass(frozen=True)
class QueryOverlay:
    origin: Location
    anchor: Location
    distance_km: float

    @classmethod
    def connect(cls, origin: Location, anchor: Location) -> "QueryOverlay":
        """Overlay *origin* onto the network with a straight road to *anchor*."""
        weight = haversine_km(
            origin.latitude, origin.longitude, anchor.latitude, anchor.longitude
        )
        return cls(origin=origin, anchor=anchor, distance_km=weight)


@dataclass
class ShortestPaths:
    origin: Location
    # every known location, in network insertion order (overlay origin last)
    distances: dict[Location, float]
    # absent for the origin and for unreachable locations
    predecessors: dict[Location, Location] = field(default_factory=dict)

    def distance_to(self, location: Location) -> float:
        return self.distances.get(location, UNREACHABLE)

    def is_reachable(self, location: Location) -> bool:
        return self.distance_to(location) < UNREACHABLE

    def path_to(self, target: Location) -> list[Location]:
        """Locations from the origin to *target*, both inclusive.

        Empty when *target* is unreachable or unknown.
        """
        if not self.is_reachable(target):
            return []
        path = [target]
        while path[-1] is not self.origin:
            path.append(self.predecessors[path[-1]])
        path.reverse()
        return path


def shortest_paths(
    network: RoadNetwork,
    origin: Location,
    *,
    overlay: Optional[QueryOverlay] = None,
    max_distance_km: Optional[float] = None,
) -> ShortestPaths:
    """Run Dijkstra from *origin* over the network (plus *overlay*, if any).

    ``max_distance_km`` bounds the search: locations farther than that are
    reported as unreachable.

    Raises ``UnknownOriginError`` if *origin* is neither a network member
    nor the overlay's origin.
    """
    with network.reading():
        if overlay is not None:
            if overlay.origin in network:
                raise ValueError(
                    f"Overlay origin {overlay.origin.name!r} is already in the network"
                )
            if overlay.anchor not in network:
                raise UnknownNodeError(
                    f"Overlay anchor not in network: {overlay.anchor.name!r}"
                )

        is_overlay_origin = overlay is not None and origin is overlay.origin
        if origin not in network and not is_overlay_origin:
            raise UnknownOriginError(f"Origin not in network: {origin.name!r}")

        return _dijkstra(network, origin, overlay, max_distance_km)


def _dijkstra(
    network: RoadNetwork,
    origin: Location,
    overlay: Optional[QueryOverlay],
    max_distance_km: Optional[float],
) -> ShortestPaths:
    overlay_index = len(network)

    def order(loc: Location) -> int:
        if overlay is not None and loc is overlay.origin:
            return overlay_index
        return network.insertion_index(loc)

    def neighbours(loc: Location) -> Iterator[tuple[Location, float]]:
        if overlay is not None and loc is overlay.origin:
            yield overlay.anchor, overlay.distance_km
            return
        for road in network.roads_from(loc):
            yield road.destination, road.distance_km
        if overlay is not None and loc is overlay.anchor:
            yield overlay.origin, overlay.distance_km

    distances = dict.fromkeys(network.locations(), UNREACHABLE)
    if overlay is not None:
        distances[overlay.origin] = UNREACHABLE
    distances[origin] = 0.0
    predecessors: dict[Location, Location] = {}

    frontier: list[tuple[float, int, Location]] = [(0.0, order(origin), origin)]
    while frontier:
        dist, _, current = heapq.heappop(frontier)
        if dist > distances[current]:
            continue  # stale entry

        for neighbour, weight in neighbours(current):
            candidate = dist + weight
            if max_distance_km is not None and candidate > max_distance_km:
                continue
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                predecessors[neighbour] = current
                heapq.heappush(frontier, (candidate, order(neighbour), neighbour))

    return ShortestPaths(origin=origin, distances=distances, predecessors=predecessors)
