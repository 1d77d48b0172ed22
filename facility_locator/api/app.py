"""
FastAPI application factory.

* Seeds the road network once, from ``settings.dataset_path`` or the
  built-in dataset, and keeps it on ``app.state.network``.
* Registers routes for facilities and admin.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from facility_locator.api.middleware import limiter
from facility_locator.api.routes import admin, facilities
from facility_locator.config import settings
from facility_locator.domain.graph import RoadNetwork
from facility_locator.infrastructure.dataset import load_dataset

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def create_app(network: Optional[RoadNetwork] = None) -> FastAPI:
    """Build the app around *network*, or seed one from the configured dataset."""
    if network is None:
        dataset = load_dataset(settings.dataset_path)
        network = dataset.build(settings.proximity_threshold_km)

    app = FastAPI(
        title="Facility Locator API",
        description=(
            "Finds the nearest service centers to a point over a road "
            "network of regional hubs, ranked by shortest road distance."
        ),
        version="1.0.0",
    )
    app.state.network = network

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(facilities.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    logger.info(
        "Facility locator ready: %d locations, %d roads",
        len(network),
        network.road_count,
    )
    return app
