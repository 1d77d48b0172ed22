"""
Nearest-facility query from an arbitrary point.

The query point is never inserted into the shared network.  It becomes
the origin of a ``QueryOverlay`` with a single road to the hub the caller
selected (the *anchor*), and shortest paths are computed over
"network + overlay" for that one call.

Two distances per result
------------------------
* ``path_distance_km`` -- accumulated road distance through the anchor.
  This is what results are **ranked** by.
* ``distance_km``      -- straight-line great-circle distance from the
  query point to the facility.  This is what a caller **displays**.

The two can differ: ranking follows the network topology while
the displayed figure reflects how far away the facility actually is.
The anchor is whatever hub the caller picked, not the nearest one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .distance import haversine_km
from .entities import Location, UnknownHubError, UnknownNodeError
from .enums import LocationCategory
from .graph import RoadNetwork
from .selector import rank
from .shortest_path import QueryOverlay, shortest_paths

logger = logging.getLogger(__name__)

QUERY_POINT_NAME = "Query Point"


@dataclass(frozen=True)
class FacilityResult:
    location: Location
    distance_km: float  # straight-line, for display
    path_distance_km: float  # through the network, used for ranking


def _overlay_for(
    network: RoadNetwork, lat: float, lng: float, anchor_hub_name: str
) -> QueryOverlay:
    anchor = network.find_hub(anchor_hub_name)
    if anchor is None:
        raise UnknownHubError(f"Hub not found: {anchor_hub_name!r}")
    origin = Location(
        name=QUERY_POINT_NAME,
        latitude=lat,
        longitude=lng,
        category=LocationCategory.QUERY_POINT,
        address="Current Location",
    )
    return QueryOverlay.connect(origin, anchor)


def query_nearest(
    network: RoadNetwork,
    lat: float,
    lng: float,
    anchor_hub_name: str,
    category: LocationCategory = LocationCategory.SERVICE_CENTER,
    limit: int = 5,
) -> list[FacilityResult]:
    """Rank the *limit* nearest locations of *category* from (lat, lng).

    Raises ``UnknownHubError`` when *anchor_hub_name* is not a hub.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    overlay = _overlay_for(network, lat, lng, anchor_hub_name)
    paths = shortest_paths(network, overlay.origin, overlay=overlay)
    ranked = rank(paths, category, limit)

    logger.debug(
        "Query (%.4f, %.4f) via %r for %s: %d result(s)",
        lat, lng, anchor_hub_name, category.value, len(ranked),
    )
    return [
        FacilityResult(
            location=r.location,
            distance_km=haversine_km(
                lat, lng, r.location.latitude, r.location.longitude
            ),
            path_distance_km=r.distance_km,
        )
        for r in ranked
    ]


def route_to(
    network: RoadNetwork,
    lat: float,
    lng: float,
    anchor_hub_name: str,
    target_name: str,
) -> list[Location]:
    """Stops of the shortest route from (lat, lng) to the named location.

    The first stop is the transient query point.  Empty when the target is
    not reachable from the anchor.  Raises ``UnknownHubError`` for an
    unknown anchor and ``UnknownNodeError`` for an unknown target.
    """
    overlay = _overlay_for(network, lat, lng, anchor_hub_name)
    target = network.get(target_name)
    if target is None:
        raise UnknownNodeError(f"Location not in network: {target_name!r}")
    paths = shortest_paths(network, overlay.origin, overlay=overlay)
    return paths.path_to(target)
