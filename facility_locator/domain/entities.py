"""
Domain entities and errors.

Identity
--------
``Location`` compares and hashes by **identity**, not by value: two
service centers may legitimately share (near-)identical coordinates, and a
graph keyed by location must keep them apart.  Names are unique within a
single ``RoadNetwork`` but that is enforced by the network, not here.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import LocationCategory


# ── Errors ────────────────────────────────────────────────────────────


class LocatorError(Exception):
    """Base class for every error raised by the facility locator core."""


class UnknownNodeError(LocatorError, KeyError):
    """Raised when a road references a location never added to the graph."""


class UnknownOriginError(LocatorError, KeyError):
    """Raised when a shortest-path run starts from a location not in the graph."""


class UnknownHubError(LocatorError, LookupError):
    """Raised when a hub name does not resolve to a HUB in the network."""


class DuplicateLocationError(LocatorError, ValueError):
    """Raised when a different location with an already-used name is added."""


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True, eq=False)
class Location:
    name: str
    latitude: float
    longitude: float
    category: LocationCategory
    # display-only metadata, never read by the algorithms
    address: str = ""
    contact: str = ""
    services: str = ""

    @property
    def lat_lng(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Road:
    """One traversable direction of an undirected road."""

    destination: Location
    distance_km: float
