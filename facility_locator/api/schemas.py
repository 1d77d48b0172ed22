"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, Field

from facility_locator.domain.entities import Location
from facility_locator.domain.enums import LocationCategory
from facility_locator.domain.query import FacilityResult


# ── Requests ──────────────────────────────────────────────────────────


class FacilityCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    hub: str = Field(..., min_length=1, description="Name of the owning hub.")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str = ""
    contact: str = ""
    services: str = ""


# ── Responses ─────────────────────────────────────────────────────────


class LocationResponse(BaseModel):
    name: str
    category: LocationCategory
    latitude: float
    longitude: float
    address: str = ""
    contact: str = ""
    services: str = ""

    @classmethod
    def from_location(cls, loc: Location) -> "LocationResponse":
        return cls(
            name=loc.name,
            category=loc.category,
            latitude=loc.latitude,
            longitude=loc.longitude,
            address=loc.address,
            contact=loc.contact,
            services=loc.services,
        )


class FacilityResponse(LocationResponse):
    distance_km: float = Field(
        ..., description="Straight-line distance from the query point."
    )
    path_distance_km: Optional[float] = Field(
        None,
        description="Road distance used for ranking; null when unreachable.",
    )
    reachable: bool = True

    @classmethod
    def from_result(cls, result: FacilityResult) -> "FacilityResponse":
        loc = result.location
        reachable = not math.isinf(result.path_distance_km)
        return cls(
            name=loc.name,
            category=loc.category,
            latitude=loc.latitude,
            longitude=loc.longitude,
            address=loc.address,
            contact=loc.contact,
            services=loc.services,
            distance_km=result.distance_km,
            path_distance_km=result.path_distance_km if reachable else None,
            reachable=reachable,
        )


class HealthResponse(BaseModel):
    status: str = "ok"
    locations: int = 0
    roads: int = 0


class ErrorResponse(BaseModel):
    detail: str
