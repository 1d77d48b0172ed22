"""Domain enumerations."""

import enum


class LocationCategory(str, enum.Enum):
    HUB = "HUB"
    SERVICE_CENTER = "SERVICE_CENTER"
    # Only ever used for the transient origin of a nearest-facility query.
    QUERY_POINT = "QUERY_POINT"
