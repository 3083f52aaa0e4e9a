"""
geopair - distance and elevation angle between geographic point pairs.
"""

from geopair.compute import compute, compute_arrays
from geopair.errors import (
    GeoPairError,
    ImplausibleElevationError,
    InvalidCoordinateError,
    InvalidShapeError,
    UnsupportedMethodError,
)
from geopair.models import GeoPoint, GeoPointSeries, Method, PairingMode, PairResult

__version__ = "0.1.0"

__all__ = [
    "compute",
    "compute_arrays",
    "GeoPoint",
    "GeoPointSeries",
    "Method",
    "PairingMode",
    "PairResult",
    "GeoPairError",
    "InvalidShapeError",
    "InvalidCoordinateError",
    "ImplausibleElevationError",
    "UnsupportedMethodError",
]
