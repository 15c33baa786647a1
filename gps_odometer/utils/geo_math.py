"""
GeoMath - Flat-Earth Bearing and Distance

Provides bearing and distance calculations between GPS fixes given as
fixed-point integers (degrees multiplied by GPS_MULT).

The distances use a local flat-earth approximation around the two points.
They are only meaningful over short ranges (a few km) and degrade near
the poles where the longitude scale factor approaches zero.
"""

import math

# Fixed-point scale of latitude/longitude values (1e-7 degree resolution)
GPS_MULT = 10000000

# Length of one degree of latitude (111.3 km) in centimeters
DEGREE_LENGTH_CM = 11130000

CM_PER_M = 100
CM_PER_KM = 100000


def to_fixed(degrees: float) -> int:
    """Convert degrees to a fixed-point coordinate value."""
    return int(round(degrees * GPS_MULT))


def from_fixed(value: int) -> float:
    """Convert a fixed-point coordinate value to degrees."""
    return value / GPS_MULT


def bearing(lat1: int, lon1: int, lat2: int, lon2: int) -> int:
    """
    Calculate the planar bearing from point 1 to point 2.

    Args:
        lat1: Latitude of point 1 (fixed-point)
        lon1: Longitude of point 1 (fixed-point)
        lat2: Latitude of point 2 (fixed-point)
        lon2: Longitude of point 2 (fixed-point)

    Returns:
        Bearing in whole degrees (0-359, where 0 is North, 90 is East)
    """
    d_lon = (lon2 - lon1) / GPS_MULT
    d_lat = (lat2 - lat1) / GPS_MULT

    # Truncate toward zero, then fold negative angles into 0-359
    return (int(math.degrees(math.atan2(d_lon, d_lat))) + 360) % 360


def distance_2d(lat1: int, lon1: int, lat2: int, lon2: int) -> int:
    """
    Calculate the distance between two points without altitude.

    The width of a 1 degree cell is taken at the average latitude of
    both points, the height of a cell is constant.
    The exact mean latitude is used, not one truncated to whole degrees.

    Args:
        lat1: Latitude of point 1 (fixed-point)
        lon1: Longitude of point 1 (fixed-point)
        lat2: Latitude of point 2 (fixed-point)
        lon2: Longitude of point 2 (fixed-point)

    Returns:
        Distance in centimeters
    """
    avg_lat_rad = math.radians((lat1 + lat2) / 2 / GPS_MULT)

    dx = math.cos(avg_lat_rad) * DEGREE_LENGTH_CM * abs(lon1 - lon2) / GPS_MULT
    dy = DEGREE_LENGTH_CM * abs(lat1 - lat2) / GPS_MULT

    return int(math.sqrt(dx * dx + dy * dy))


def distance_3d(lat1: int, lon1: int, alt1: float,
                lat2: int, lon2: int, alt2: float) -> int:
    """
    Calculate the distance between two points including altitude.

    The horizontal displacement is built from a pure-longitude and a
    pure-latitude leg, both measured from point 1.

    Args:
        lat1: Latitude of point 1 (fixed-point)
        lon1: Longitude of point 1 (fixed-point)
        alt1: Altitude of point 1 (meters)
        lat2: Latitude of point 2 (fixed-point)
        lon2: Longitude of point 2 (fixed-point)
        alt2: Altitude of point 2 (meters)

    Returns:
        Distance in centimeters
    """
    dx = distance_2d(lat1, lon1, lat1, lon2)
    dy = distance_2d(lat1, lon1, lat2, lon1)
    da = abs(alt1 - alt2) * CM_PER_M

    return int(math.sqrt(float(dx) * dx + float(dy) * dy + da * da))
