"""
Admin / observability endpoints
===============================

GET /api/v1/admin/hubs   -- hubs available as query anchors
GET /api/v1/admin/health -- health check with network size
"""

from fastapi import APIRouter, Depends, Request

from facility_locator.api.dependencies import get_network
from facility_locator.api.middleware import limiter
from facility_locator.api.schemas import HealthResponse, LocationResponse
from facility_locator.config import settings
from facility_locator.domain.graph import RoadNetwork

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/hubs",
    response_model=list[LocationResponse],
    summary="List hubs in insertion order",
)
@limiter.limit(settings.rate_limit)
def list_hubs(
    request: Request,
    network: RoadNetwork = Depends(get_network),
):
    with network.reading():
        hubs = network.hubs()
    return [LocationResponse.from_location(h) for h in hubs]


@router.get("/health", response_model=HealthResponse, summary="Health check")
def health(network: RoadNetwork = Depends(get_network)):
    with network.reading():
        return HealthResponse(locations=len(network), roads=network.road_count)
