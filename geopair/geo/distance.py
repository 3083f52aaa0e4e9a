"""Distance and elevation angle calculations for a single pair of points."""

import math

from geopair.config import settings
from geopair.models import GeoPoint, PairResult


def haversine_km(p1: GeoPoint, p2: GeoPoint) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Uses the Haversine formula on a sphere of radius settings.earth_radius_km.
    Elevation is ignored.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Surface distance in kilometers
    """
    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    dlat = math.radians(p2.lat - p1.lat)
    dlon = math.radians(p2.lon - p1.lon)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # rounding can push a just past 1 for near-antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return settings.earth_radius_km * c


def pythagorean_pair(p1: GeoPoint, p2: GeoPoint) -> PairResult:
    """
    Straight-line distance on a local flat-earth approximation.

    Degree differences are scaled by settings.km_per_degree, with the
    longitude difference corrected by the cosine of the mean latitude.
    The line may pass "through" the Earth for distant surface points.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Distance in kilometers and elevation angle from p1 to p2 in degrees.
        Identical points give an angle of 0.
    """
    lat_diff = settings.km_per_degree * (p2.lat - p1.lat)
    lon_diff = settings.km_per_degree * (p2.lon - p1.lon)
    elv_diff = p2.elevation - p1.elevation

    x = lon_diff * math.cos(math.radians((p1.lat + p2.lat) / 2))
    y = lat_diff
    z = elv_diff
    distance = math.sqrt(x**2 + y**2 + z**2)

    if distance == 0:
        return PairResult(distance=0.0, elevation_angle=0.0)

    ratio = max(-1.0, min(1.0, elv_diff / distance))
    return PairResult(distance=distance, elevation_angle=math.degrees(math.asin(ratio)))


def haversine_pair(p1: GeoPoint, p2: GeoPoint) -> PairResult:
    """
    Great-circle surface distance adjusted for elevation difference.

    The surface arc and the elevation difference are combined as the legs of
    a right triangle. This is inaccurate for long distances combined with
    large elevations.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Distance in kilometers and elevation angle from p1 to p2 in degrees.
        Identical points give 0; a purely vertical offset gives +/-90.
    """
    surface = haversine_km(p1, p2)
    elv_diff = p2.elevation - p1.elevation

    # atan2 matches atan(elv_diff / surface) and is 0 for coincident points
    elevation_angle = math.degrees(math.atan2(elv_diff, surface))
    distance = math.sqrt(surface**2 + elv_diff**2)

    return PairResult(distance=distance, elevation_angle=elevation_angle)
