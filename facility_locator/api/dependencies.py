"""FastAPI dependency injection helpers."""

from fastapi import Request

from facility_locator.domain.graph import RoadNetwork


def get_network(request: Request) -> RoadNetwork:
    """The road network seeded at application start-up."""
    return request.app.state.network
