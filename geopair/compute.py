"""Distance and elevation angle between two point series."""

import logging
from typing import Any, Sequence

from geopair.geo import haversine_pair, pythagorean_pair
from geopair.models import GeoPoint, GeoPointSeries, Method, PairResult
from geopair.pairing import iter_pairs, resolve_pairing_mode
from geopair.validation import check_elevation_units

logger = logging.getLogger(__name__)

_FORMULAS = {
    Method.PYTHAGOREAN: pythagorean_pair,
    Method.HAVERSINE: haversine_pair,
}


def compute(
    series_a: Sequence[Any], series_b: Sequence[Any], method: "str | Method"
) -> list[PairResult]:
    """
    Compute distance and elevation angle from each point of A to its partner in B.

    Either series may be a single static location, which is paired with every
    point of the other. Series of equal length are paired elementwise.

    Args:
        series_a: Rows of (lat, lon[, elevation]) in degrees and kilometers,
            GeoPoints, a single flat row, or a GeoPointSeries
        series_b: Same as series_a
        method: "pythagorean" or "haversine"

    Returns:
        One PairResult per pair, in pairing order

    Raises:
        UnsupportedMethodError: If the method is unknown
        InvalidShapeError: If a series is malformed or the lengths can't be paired
        InvalidCoordinateError: If a coordinate is not numeric or out of range
        ImplausibleElevationError: If elevations are too large to be kilometers
    """
    method = Method.parse(method)
    formula = _FORMULAS[method]

    a = _to_series(series_a, "A")
    b = _to_series(series_b, "B")

    mode = resolve_pairing_mode(len(a.points), len(b.points))

    for series in (a, b):
        check_elevation_units(series)
    for series in (a, b):
        if not series.has_elevation:
            logger.info(f"Assuming zero elevation for series {series.name}")

    logger.debug(
        f"Computing {method.value} distance for {len(a.points)} x {len(b.points)} "
        f"points ({mode.value})"
    )

    return [formula(p1, p2) for p1, p2 in iter_pairs(a, b, mode)]


def compute_arrays(
    series_a: Sequence[Any], series_b: Sequence[Any], method: "str | Method"
) -> tuple[list[float], list[float]]:
    """
    Same as compute, returned as parallel columns.

    Returns:
        (distances, elevation_angles)
    """
    results = compute(series_a, series_b, method)
    return [r.distance for r in results], [r.elevation_angle for r in results]


def _to_series(value: Any, name: str) -> GeoPointSeries:
    if isinstance(value, GeoPointSeries):
        return value.model_copy(update={"name": name})
    if isinstance(value, GeoPoint):
        value = [value]
    return GeoPointSeries.from_rows(value, name)
