"""Errors raised by geopair computations."""


class GeoPairError(Exception):
    """Base error for geopair."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidShapeError(GeoPairError):
    """A point series has the wrong number of columns or an incompatible length."""


class InvalidCoordinateError(GeoPairError):
    """A latitude or longitude is out of range or not a number."""


class ImplausibleElevationError(GeoPairError):
    """Elevation values are too large to be kilometers."""


class UnsupportedMethodError(GeoPairError):
    """The requested distance method is not known."""
