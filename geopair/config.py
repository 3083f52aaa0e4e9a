"""
Configuration management for geopair.

Uses pydantic-settings for environment variable loading with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """geopair configuration."""

    # Earth model
    earth_radius_km: float = 6371.0  # mean radius, spherical approximation
    km_per_degree: float = 111.3  # flat-earth scale for the pythagorean method

    # Elevation sanity thresholds (kilometers)
    cruise_altitude_km: float = 11.0  # above this, values probably are meters
    orbital_altitude_km: float = 400.0  # above this, values are rejected

    model_config = {
        "env_prefix": "GEOPAIR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
