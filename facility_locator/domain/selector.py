"""
Nearest-facility selection on top of the shortest-path engine.

Ordering: ascending path distance, ties broken by network insertion
order.  Unreachable locations (distance = ``UNREACHABLE``) are kept and
ranked after every reachable one; they are never silently dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .entities import Location
from .enums import LocationCategory
from .graph import RoadNetwork
from .shortest_path import QueryOverlay, ShortestPaths, shortest_paths


@dataclass(frozen=True)
class RankedLocation:
    location: Location
    distance_km: float  # path distance; UNREACHABLE when disconnected


def rank(
    paths: ShortestPaths, category: LocationCategory, limit: int
) -> list[RankedLocation]:
    """Top-*limit* locations of *category* from an existing distance map."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if limit == 0:
        return []

    candidates = [
        RankedLocation(loc, dist)
        for loc, dist in paths.distances.items()
        if loc.category == category
    ]
    # sort is stable and the map is in insertion order
    candidates.sort(key=lambda r: r.distance_km)
    return candidates[:limit]


def nearest(
    network: RoadNetwork,
    origin: Location,
    category: LocationCategory,
    limit: int,
    *,
    overlay: Optional[QueryOverlay] = None,
) -> list[RankedLocation]:
    """The *limit* locations of *category* closest to *origin* by path distance."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    paths = shortest_paths(network, origin, overlay=overlay)
    return rank(paths, category, limit)
