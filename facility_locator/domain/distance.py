"""
Great-circle distance between two coordinates (Haversine formula).

Every road weight in the network and every distance shown to a caller
comes from this function.  Inputs are plain decimal degrees; out-of-range
values are not rejected here (the HTTP boundary validates them), they
simply produce a meaningless distance.

Complexity: O(1) per call.
"""

import math

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    if lat1 == lat2 and lng1 == lng2:
        return 0.0

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lng2 - lng1)

    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # clamp: rounding (or out-of-range input) can push ``a`` outside [0, 1]
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, max(0.0, a))))
