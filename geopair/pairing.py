"""Matching up the points of two series."""

from typing import Iterator

from geopair.errors import InvalidShapeError
from geopair.models import GeoPoint, GeoPointSeries, PairingMode


def resolve_pairing_mode(len_a: int, len_b: int) -> PairingMode:
    """
    Decide how two series of the given lengths are paired.

    Equal lengths pair elementwise. Otherwise the shorter series must be a
    single static point, which is broadcast against every point of the other.

    Raises:
        InvalidShapeError: If the lengths differ and neither is 1
    """
    if len_a == len_b:
        return PairingMode.ELEMENTWISE
    if len_a > len_b:
        if len_b != 1:
            raise InvalidShapeError(
                f"Series B ({len_b} points) is not as long as series A ({len_a} points)"
            )
        return PairingMode.BROADCAST_B
    if len_a != 1:
        raise InvalidShapeError(
            f"Series A ({len_a} points) is not as long as series B ({len_b} points)"
        )
    return PairingMode.BROADCAST_A


def iter_pairs(
    series_a: GeoPointSeries, series_b: GeoPointSeries, mode: PairingMode
) -> Iterator[tuple[GeoPoint, GeoPoint]]:
    """Yield (A, B) point pairs in output order for an already resolved mode."""
    a, b = series_a.points, series_b.points

    if mode is PairingMode.ELEMENTWISE:
        yield from zip(a, b)
    elif mode is PairingMode.BROADCAST_B:
        for point in a:
            yield point, b[0]
    else:
        for point in b:
            yield a[0], point
