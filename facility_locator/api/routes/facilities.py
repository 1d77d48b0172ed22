"""
Facility endpoints
==================

GET  /api/v1/facilities/nearest -- K nearest locations of a category
GET  /api/v1/facilities/route   -- stops from a query point to a location
POST /api/v1/facilities         -- register a new service center (201)

Endpoints are plain ``def`` so FastAPI runs the synchronous graph code in
its threadpool; the network's reader/writer lock keeps queries and
registrations from interleaving.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from facility_locator.api.dependencies import get_network
from facility_locator.api.middleware import limiter
from facility_locator.api.schemas import (
    ErrorResponse,
    FacilityCreateRequest,
    FacilityResponse,
    LocationResponse,
)
from facility_locator.config import settings
from facility_locator.domain.entities import (
    DuplicateLocationError,
    UnknownHubError,
    UnknownNodeError,
)
from facility_locator.domain.enums import LocationCategory
from facility_locator.domain.graph import RoadNetwork
from facility_locator.domain.network_builder import FacilitySpec, register_facility
from facility_locator.domain.query import query_nearest, route_to

router = APIRouter(prefix="/facilities", tags=["facilities"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get(
    "/nearest",
    response_model=list[FacilityResponse],
    summary="Find the nearest facilities to a point",
    description=(
        "The query point is linked to the selected hub and results are "
        "ranked by road distance through it. ``distance_km`` in each "
        "result is the straight-line distance from the query point."
    ),
    responses=_NOT_FOUND,
)
@limiter.limit(settings.rate_limit)
def nearest_facilities(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    hub: str = Query(..., min_length=1, description="Anchor hub name."),
    category: LocationCategory = LocationCategory.SERVICE_CENTER,
    limit: int = Query(settings.default_result_limit, ge=0, le=settings.max_result_limit),
    network: RoadNetwork = Depends(get_network),
):
    try:
        results = query_nearest(network, lat, lng, hub, category, limit)
    except UnknownHubError:
        raise HTTPException(status_code=404, detail="Hub not found in the network")
    return [FacilityResponse.from_result(r) for r in results]


@router.get(
    "/route",
    response_model=list[LocationResponse],
    summary="Shortest route from a point to a location",
    description="Empty list when the location is not reachable from the hub.",
    responses=_NOT_FOUND,
)
@limiter.limit(settings.rate_limit)
def facility_route(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    hub: str = Query(..., min_length=1),
    facility: str = Query(..., min_length=1, description="Destination name."),
    network: RoadNetwork = Depends(get_network),
):
    try:
        stops = route_to(network, lat, lng, hub, facility)
    except UnknownHubError:
        raise HTTPException(status_code=404, detail="Hub not found in the network")
    except UnknownNodeError:
        raise HTTPException(status_code=404, detail="Facility not found in the network")
    return [LocationResponse.from_location(loc) for loc in stops]


@router.post(
    "",
    status_code=201,
    response_model=LocationResponse,
    summary="Register a service center",
    responses={**_NOT_FOUND, 409: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
def create_facility(
    request: Request,
    body: FacilityCreateRequest,
    network: RoadNetwork = Depends(get_network),
):
    spec = FacilitySpec(
        name=body.name,
        hub=body.hub,
        latitude=body.latitude,
        longitude=body.longitude,
        address=body.address,
        contact=body.contact,
        services=body.services,
    )
    try:
        facility = register_facility(network, spec)
    except UnknownHubError:
        raise HTTPException(status_code=404, detail="Hub not found in the network")
    except DuplicateLocationError:
        raise HTTPException(
            status_code=409, detail=f"Location {body.name!r} already exists"
        )
    return LocationResponse.from_location(facility)
