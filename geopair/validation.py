"""Validation helpers for caller-supplied point series."""

from __future__ import annotations

import logging
from numbers import Real

from geopair.config import settings
from geopair.errors import ImplausibleElevationError, InvalidShapeError

logger = logging.getLogger(__name__)

_MIN_COLUMNS = 2  # lat, lon
_MAX_COLUMNS = 3  # lat, lon, elevation


def as_rows(values, name: str) -> list:
    """Normalize series input to a list of rows.

    A flat sequence of numbers such as ``(53.1472, -1.8494, 0.0)`` is a single
    static location and becomes a one-row list. Anything else is returned as
    a list of its items.

    Raises InvalidShapeError if the input is not iterable.
    """
    try:
        rows = list(values)
    except TypeError:
        raise InvalidShapeError(f"Series {name} is not a sequence of points") from None

    if rows and all(isinstance(v, Real) for v in rows):
        return [rows]
    return rows


def validate_row_widths(widths: list[int], name: str) -> int:
    """Check that a series is non-empty and has 2 or 3 uniform columns.

    Returns the column count or raises InvalidShapeError.
    """
    if not widths:
        raise InvalidShapeError(f"Series {name} is empty")

    width = widths[0]
    if width < _MIN_COLUMNS or width > _MAX_COLUMNS:
        raise InvalidShapeError(
            f"Series {name} has {width} columns; expected latitude, longitude "
            "and optionally elevation"
        )
    if any(w != width for w in widths):
        raise InvalidShapeError(f"Series {name} rows do not all have {width} columns")

    return width


def check_elevation_units(series) -> None:
    """Sanity-check that a series' elevations are in kilometers.

    Only the maximum elevation is inspected, and only when the caller
    supplied the elevation column:
    - above cruise altitude up to orbital altitude: logged warning
    - above orbital altitude: ImplausibleElevationError
    """
    if not series.has_elevation:
        return

    highest = series.max_elevation()
    if highest > settings.orbital_altitude_km:
        raise ImplausibleElevationError(
            f"Series {series.name} has elevation {highest} km, beyond the "
            f"{settings.orbital_altitude_km} km orbital altitude. Make sure "
            "elevation is in kilometers and not meters"
        )
    if highest > settings.cruise_altitude_km:
        logger.warning(
            f"Series {series.name} has elevation values above the "
            f"{settings.cruise_altitude_km} km cruise altitude of an airliner. "
            "Are these meters instead of kilometers?"
        )
