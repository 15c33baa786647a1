"""
Mock GPS - Simulated Tracks for Testing Without a Receiver

Generates GPS samples along a straight line at constant speed and
hands them out one by one, for publishing into a GpsStore the way the
receiver driver would.
"""

import math
import random
import logging
from typing import Iterator, Optional

from gps_odometer.flight.gps_data import GeoCoordinate, GpsSample
from gps_odometer.flight.odometer import MPS_TO_KNOTS
from gps_odometer.utils.geo_math import DEGREE_LENGTH_CM, CM_PER_M

logger = logging.getLogger(__name__)

DEGREE_LENGTH_M = DEGREE_LENGTH_CM / CM_PER_M


class MockGpsTrack:
    """
    Straight-line GPS track generator.

    Positions advance by speed * interval each sample along a fixed
    heading. Reported ground speed matches the simulated speed unless
    overridden.
    """

    def __init__(self, start_lat: float = 12.9716, start_lon: float = 77.5946,
                 altitude: float = 20.0, speed_mps: float = 5.0,
                 heading_deg: float = 0.0, interval_s: float = 1.0,
                 jitter_m: float = 0.0, reported_speed_knots: Optional[float] = None,
                 seed: int = None):
        """
        Initialize MockGpsTrack.

        Args:
            start_lat: Start latitude (degrees)
            start_lon: Start longitude (degrees)
            altitude: Constant altitude (meters)
            speed_mps: Simulated speed (m/s)
            heading_deg: Direction of travel (0 = North, 90 = East)
            interval_s: Time between samples (seconds)
            jitter_m: Max random position error added per sample (meters)
            reported_speed_knots: Ground speed to report instead of the true one
            seed: Random seed for reproducible jitter
        """
        self.start_lat = start_lat
        self.start_lon = start_lon
        self.altitude = altitude
        self.speed_mps = speed_mps
        self.heading_deg = heading_deg
        self.interval_s = interval_s
        self.jitter_m = jitter_m
        self.reported_speed_knots = reported_speed_knots
        self.rng = random.Random(seed)

        logger.info(f"MockGpsTrack: start=({start_lat:.6f}, {start_lon:.6f}), "
                    f"speed={speed_mps}m/s, heading={heading_deg}°, "
                    f"interval={interval_s}s")

    def position_at(self, index: int) -> GeoCoordinate:
        """Get the true (jitter-free) position of sample index."""
        travelled = self.speed_mps * self.interval_s * index
        heading_rad = math.radians(self.heading_deg)

        north_m = travelled * math.cos(heading_rad)
        east_m = travelled * math.sin(heading_rad)

        lat = self.start_lat + north_m / DEGREE_LENGTH_M
        lon = self.start_lon + east_m / (DEGREE_LENGTH_M * math.cos(math.radians(lat)))
        return GeoCoordinate.from_degrees(lat, lon)

    def sample_at(self, index: int) -> GpsSample:
        """Build the sample the receiver would report for index."""
        coordinate = self.position_at(index)

        if self.jitter_m > 0:
            lat, lon = coordinate.to_degrees()
            lat += self.rng.uniform(-self.jitter_m, self.jitter_m) / DEGREE_LENGTH_M
            lon += self.rng.uniform(-self.jitter_m, self.jitter_m) / \
                (DEGREE_LENGTH_M * math.cos(math.radians(lat)))
            coordinate = GeoCoordinate.from_degrees(lat, lon)

        if self.reported_speed_knots is not None:
            ground_speed = self.reported_speed_knots
        else:
            ground_speed = self.speed_mps * MPS_TO_KNOTS

        return GpsSample(coordinate=coordinate, altitude=self.altitude,
                         ground_speed=ground_speed)

    def samples(self, count: int) -> Iterator[GpsSample]:
        """Yield count consecutive samples."""
        for index in range(count):
            yield self.sample_at(index)
