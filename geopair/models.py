"""
Pydantic models for geopair.

These models define the point, series and result structures passed through a
distance computation.
"""

from enum import Enum
from typing import Any, Sequence

from pydantic import BaseModel, Field, ValidationError

from geopair.errors import InvalidCoordinateError, InvalidShapeError, UnsupportedMethodError
from geopair.validation import as_rows, validate_row_widths


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------


class Method(str, Enum):
    """Distance formula used for every pair of a computation."""

    PYTHAGOREAN = "pythagorean"
    HAVERSINE = "haversine"

    @classmethod
    def parse(cls, value: "str | Method") -> "Method":
        """
        Resolve a method name.

        Raises:
            UnsupportedMethodError: If the name is not a known method
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(m.value for m in cls)
            raise UnsupportedMethodError(
                f"Unsupported method {value!r}; expected one of: {known}"
            ) from None


class PairingMode(Enum):
    """How the points of two series are matched up."""

    ELEMENTWISE = "elementwise"  # A[i] with B[i]
    BROADCAST_B = "broadcast_b"  # A[i] with B[0]
    BROADCAST_A = "broadcast_a"  # A[0] with B[i]


# -----------------------------------------------------------------------------
# Point Models
# -----------------------------------------------------------------------------


class GeoPoint(BaseModel):
    """A point given in decimal degrees with elevation in kilometers."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in degrees")
    elevation: float = Field(
        default=0.0, allow_inf_nan=False, description="Elevation in kilometers"
    )


def _row_width(row: Any, name: str) -> int:
    if isinstance(row, GeoPoint):
        return 3 if "elevation" in row.model_fields_set else 2
    try:
        return len(row)
    except TypeError:
        raise InvalidShapeError(f"Series {name} rows must be sequences, got {row!r}") from None


def _point_from_row(row: Any, name: str, index: int) -> GeoPoint:
    if isinstance(row, GeoPoint):
        return row

    try:
        lat, lon, *rest = (float(v) for v in row)
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinateError(
            f"Series {name} row {index} is not numeric: {row!r}"
        ) from exc

    try:
        return GeoPoint(lat=lat, lon=lon, elevation=rest[0] if rest else 0.0)
    except ValidationError as exc:
        raise InvalidCoordinateError(
            f"Series {name} row {index} is out of range: {row!r}"
        ) from exc


class GeoPointSeries(BaseModel):
    """An ordered, non-empty run of points: one static location or a track."""

    name: str = "A"
    points: list[GeoPoint] = Field(..., min_length=1)
    has_elevation: bool = Field(
        default=True, description="Whether the caller supplied the elevation column"
    )

    @classmethod
    def from_rows(cls, rows: Sequence[Any], name: str = "A") -> "GeoPointSeries":
        """
        Build a series from raw rows.

        Each row is ``(lat, lon)`` or ``(lat, lon, elevation)``, or a GeoPoint.
        A flat sequence of numbers is taken as a single static location.
        Rows without elevation get an elevation of 0.

        Args:
            rows: Raw caller input
            name: Label used in log messages and errors

        Returns:
            The validated series

        Raises:
            InvalidShapeError: If the column count is not 2 or 3, row widths
                differ, or the series is empty
            InvalidCoordinateError: If a value is not numeric or out of range
        """
        rows = as_rows(rows, name)
        width = validate_row_widths([_row_width(row, name) for row in rows], name)
        points = [_point_from_row(row, name, i) for i, row in enumerate(rows)]
        return cls(name=name, points=points, has_elevation=width == 3)

    def max_elevation(self) -> float:
        """Highest elevation in the series, in kilometers."""
        return max(p.elevation for p in self.points)


# -----------------------------------------------------------------------------
# Result Models
# -----------------------------------------------------------------------------


class PairResult(BaseModel):
    """Distance and elevation angle from the first point of a pair to the second."""

    distance: float = Field(..., ge=0, description="Distance in kilometers")
    elevation_angle: float = Field(
        ..., ge=-90, le=90, description="Elevation angle in degrees"
    )
