"""
Seeding a road network from hub and facility specifications.

Wiring rules
------------
1. Every hub becomes a ``HUB`` location, in input order.
2. Every facility becomes a ``SERVICE_CENTER`` with one road to its
   owning hub.
3. Every pair of hubs (i < j, input order) whose great-circle distance is
   strictly below ``proximity_threshold_km`` gets a road.

Hubs farther apart than the threshold from every other hub stay
disconnected; the shortest-path engine handles that.

Complexity: O(F + H^2) for F facilities and H hubs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Sequence

from .distance import haversine_km
from .entities import Location, UnknownHubError, UnknownNodeError
from .enums import LocationCategory
from .graph import RoadNetwork

logger = logging.getLogger(__name__)

DEFAULT_PROXIMITY_THRESHOLD_KM = 100.0


@dataclass(frozen=True)
class HubSpec:
    name: str
    latitude: float
    longitude: float
    address: str = ""
    contact: str = ""
    services: str = ""

    def to_location(self) -> Location:
        return Location(
            name=self.name,
            latitude=self.latitude,
            longitude=self.longitude,
            category=LocationCategory.HUB,
            address=self.address,
            contact=self.contact,
            services=self.services,
        )


@dataclass(frozen=True)
class FacilitySpec:
    name: str
    hub: str  # name of the owning hub
    latitude: float
    longitude: float
    address: str = ""
    contact: str = ""
    services: str = ""

    def to_location(self) -> Location:
        return Location(
            name=self.name,
            latitude=self.latitude,
            longitude=self.longitude,
            category=LocationCategory.SERVICE_CENTER,
            address=self.address,
            contact=self.contact,
            services=self.services,
        )


@dataclass(frozen=True)
class FacilityTemplate:
    """A facility kind replicated around every hub at a fixed offset.

    ``name`` and ``address`` are prefixes; the hub name is appended
    (``"Soil Testing Lab - Almora"``, ``"Research Complex, Almora"``).
    """

    name: str
    lat_offset: float
    lng_offset: float
    address: str
    contact: str = ""
    services: str = ""

    def for_hub(self, hub: HubSpec) -> FacilitySpec:
        return FacilitySpec(
            name=f"{self.name} - {hub.name}",
            hub=hub.name,
            latitude=hub.latitude + self.lat_offset,
            longitude=hub.longitude + self.lng_offset,
            address=f"{self.address}, {hub.name}",
            contact=self.contact,
            services=self.services,
        )


def expand_templates(
    hubs: Iterable[HubSpec], templates: Sequence[FacilityTemplate]
) -> list[FacilitySpec]:
    """One facility per (hub, template), hub-major order."""
    return [template.for_hub(hub) for hub in hubs for template in templates]


def build_network(
    hubs: Sequence[HubSpec],
    facilities: Iterable[FacilitySpec],
    proximity_threshold_km: float = DEFAULT_PROXIMITY_THRESHOLD_KM,
) -> RoadNetwork:
    """Seed a fresh ``RoadNetwork``; see the module docstring for the rules.

    Raises ``UnknownNodeError`` when a facility names a hub that is not in
    *hubs*.
    """
    network = RoadNetwork()
    hub_locations: list[Location] = []

    for spec in hubs:
        loc = spec.to_location()
        network.add_location(loc)
        hub_locations.append(loc)

    facility_count = 0
    for spec in facilities:
        hub = network.find_hub(spec.hub)
        if hub is None:
            raise UnknownNodeError(
                f"Facility {spec.name!r} references unknown hub {spec.hub!r}"
            )
        facility = spec.to_location()
        network.add_location(facility)
        network.add_road(hub, facility)
        facility_count += 1

    hub_roads = 0
    for a, b in combinations(hub_locations, 2):
        if haversine_km(a.latitude, a.longitude, b.latitude, b.longitude) < proximity_threshold_km:
            network.add_road(a, b)
            hub_roads += 1

    logger.info(
        "Road network built: %d hubs, %d facilities, %d inter-hub roads "
        "(threshold=%.1f km)",
        len(hub_locations),
        facility_count,
        hub_roads,
        proximity_threshold_km,
    )
    return network


def register_facility(network: RoadNetwork, spec: FacilitySpec) -> Location:
    """Permanently add a service center to a live network, attached to its hub.

    Raises ``UnknownHubError`` if the owning hub does not exist and
    ``DuplicateLocationError`` if the name is already taken.
    """
    hub = network.find_hub(spec.hub)
    if hub is None:
        raise UnknownHubError(f"Hub not found: {spec.hub!r}")
    facility = spec.to_location()
    weight = network.attach(facility, hub)
    logger.info(
        "Registered facility %r at hub %r (%.2f km)", spec.name, spec.hub, weight
    )
    return facility
