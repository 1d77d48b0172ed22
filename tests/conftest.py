"""
Shared test fixtures.

Networks are built in memory with plain hub / facility specs.  Points on
the equator are used where exact distances matter: along the equator a
longitude difference of ``d`` degrees is exactly ``d * KM_PER_DEGREE`` km.
"""

import math
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from facility_locator.domain.distance import EARTH_RADIUS_KM
from facility_locator.domain.graph import RoadNetwork
from facility_locator.domain.network_builder import (
    FacilitySpec,
    HubSpec,
    build_network,
)

KM_PER_DEGREE = 2 * math.pi * EARTH_RADIUS_KM / 360


def equator_lng(km: float) -> float:
    """Longitude lying *km* east of (0, 0) along the equator."""
    return km / KM_PER_DEGREE


# ── Networks ──────────────────────────────────────────────────────────


@pytest.fixture
def chain_network() -> RoadNetwork:
    """
    A --50 km-- B --40 km-- C, all on the equator, threshold 60 km so A and
    C (90 km apart) get no direct road.  Two facilities hang off C and one
    off A.  D is 1000 km away with its own facility and no road to anyone.
    """
    hubs = [
        HubSpec("A", 0.0, 0.0),
        HubSpec("B", 0.0, equator_lng(50)),
        HubSpec("C", 0.0, equator_lng(90)),
        HubSpec("D", 0.0, equator_lng(1000)),
    ]
    facilities = [
        FacilitySpec("C-north", "C", 0.01, equator_lng(90)),
        FacilitySpec("C-south", "C", -0.02, equator_lng(90)),
        FacilitySpec("A-east", "A", 0.0, equator_lng(5)),
        FacilitySpec("D-lab", "D", 0.0, equator_lng(1001)),
    ]
    return build_network(hubs, facilities, proximity_threshold_km=60.0)


@pytest.fixture
def two_hub_network() -> RoadNetwork:
    """H1 (30.0, 78.0) and H2 (30.0, 79.0) with facility F attached to H1."""
    hubs = [HubSpec("H1", 30.0, 78.0), HubSpec("H2", 30.0, 79.0)]
    facilities = [FacilitySpec("F", "H1", 30.01, 78.01)]
    return build_network(hubs, facilities)


# ── API client ────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def client(chain_network: RoadNetwork) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient against an app serving ``chain_network``."""
    from facility_locator.api.app import create_app

    app = create_app(network=chain_network)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
