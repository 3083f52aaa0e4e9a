"""Pytest configuration and fixtures for geopair tests."""

import logging

import pytest

from geopair.models import GeoPoint


@pytest.fixture
def london():
    """A point north-west of London, on the surface."""
    return GeoPoint(lat=53.1472, lon=-1.8494, elevation=0)


@pytest.fixture
def warsaw():
    """Warsaw, on the surface."""
    return GeoPoint(lat=52.2296, lon=21.0122, elevation=0)


@pytest.fixture
def track():
    """A short climbing track of (lat, lon, elevation) rows."""
    return [
        (40.0000, -105.0000, 1.6),
        (40.0100, -105.0100, 2.1),
        (40.0200, -105.0200, 3.4),
        (40.0300, -105.0300, 5.0),
        (40.0400, -105.0400, 7.2),
    ]


@pytest.fixture
def ground_station():
    """A single static location as a (lat, lon, elevation) row."""
    return [(39.9900, -104.9900, 1.6)]


@pytest.fixture
def geopair_logs(caplog):
    """Capture geopair log records down to INFO."""
    caplog.set_level(logging.INFO, logger="geopair")
    return caplog
