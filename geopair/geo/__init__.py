"""Distance formulas for point pairs."""

from .distance import haversine_km, haversine_pair, pythagorean_pair

__all__ = [
    "haversine_km",
    "haversine_pair",
    "pythagorean_pair",
]
