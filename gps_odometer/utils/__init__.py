# Utilities - Helper Functions
"""
Utility modules for geospatial calculations and configuration.

Modules:
    - geo_math: Fixed-point bearing and flat-earth distance calculations
    - config: YAML parameter loading
"""

from .geo_math import GPS_MULT, bearing, distance_2d, distance_3d, to_fixed, from_fixed
from .config import DEFAULT_CONFIG, load_config

__all__ = [
    "GPS_MULT",
    "bearing",
    "distance_2d",
    "distance_3d",
    "to_fixed",
    "from_fixed",
    "DEFAULT_CONFIG",
    "load_config"
]
