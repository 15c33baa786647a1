"""
Odometer - Distance Accumulation From GPS Samples

Consumes each new GPS sample once, refreshes the home bearing/distance
readout and adds the travelled distance to the odometer when the sample
passes a speed plausibility check.

The check compares the speed implied by the distance between two
consecutive samples with the ground speed reported by the receiver.
Samples that disagree, or that were taken while (nearly) standing still,
are dropped. A dropped sample still becomes the reference for the next
one, so a single bad fix only costs its own leg.
"""

import logging
from typing import Optional
from dataclasses import dataclass

from .gps_data import GpsConsumer, GpsSample, GpsStore
from .flight_state import FlightState, HomePosition
from ..utils.geo_math import CM_PER_KM, CM_PER_M, bearing, distance_2d, distance_3d

logger = logging.getLogger(__name__)

MPS_TO_KNOTS = 1.94384
KMH_TO_KNOTS = 0.539957


@dataclass
class OdometerConfig:
    """Plausibility filter parameters (speeds in knots)."""
    max_speed_diff: float = 10 * KMH_TO_KNOTS
    min_speed: float = 1 * KMH_TO_KNOTS
    sample_interval_s: float = 1.0

    @classmethod
    def from_dict(cls, config: dict = None) -> "OdometerConfig":
        """
        Build from the 'odometer' config section.

        Args:
            config: Dictionary with keys:
                - max_speed_diff_kmh: Max difference of computed and GPS speed
                - min_speed_kmh: GPS speed required to count distance
                - sample_interval_s: Seconds between two GPS samples
        """
        config = config or {}
        if not isinstance(config, dict):
            raise ValueError(f"odometer config must be a mapping, got {type(config).__name__}")

        try:
            max_speed_diff_kmh = float(config.get('max_speed_diff_kmh', 10.0))
            min_speed_kmh = float(config.get('min_speed_kmh', 1.0))
            interval = float(config.get('sample_interval_s', 1.0))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid odometer config value: {e}") from e

        if interval <= 0:
            raise ValueError(f"sample_interval_s must be positive, got {interval}")

        return cls(
            max_speed_diff=max_speed_diff_kmh * KMH_TO_KNOTS,
            min_speed=min_speed_kmh * KMH_TO_KNOTS,
            sample_interval_s=interval
        )


@dataclass(frozen=True)
class PreviousFix:
    """Position of the last processed sample."""
    lat: int
    lon: int
    altitude: float


class Odometer:
    """
    Per-sample odometer updater.

    Call step() once per GPS cycle. The caller must hold exclusive access
    to the GPS store and flight state for the duration of the call.
    """

    def __init__(self, gps_store: GpsStore, flight_state: FlightState,
                 home: HomePosition = None, config: OdometerConfig = None):
        """
        Initialize Odometer.

        Args:
            gps_store: Source of GPS samples and "new sample" flags
            flight_state: Readouts to update
            home: Home position (home readout disabled if None or invalid)
            config: Filter parameters
        """
        self.gps_store = gps_store
        self.flight_state = flight_state
        self.home = home or HomePosition()
        self.config = config or OdometerConfig()

        self.previous_fix: Optional[PreviousFix] = None

        # Statistics
        self.samples_consumed = 0
        self.samples_accepted = 0
        self.samples_rejected = 0

        logger.info(f"Odometer initialized: max_speed_diff={self.config.max_speed_diff:.2f}kn, "
                    f"min_speed={self.config.min_speed:.2f}kn, "
                    f"interval={self.config.sample_interval_s}s, "
                    f"home={'valid' if self.home.valid else 'not set'}")

    def step(self) -> bool:
        """
        Process the current GPS sample if it is new for the odometer.

        Returns:
            True if a sample was consumed, False if there was nothing new
        """
        if not self.gps_store.consume(GpsConsumer.ODOMETER):
            return False

        sample = self.gps_store.current
        if sample is None:
            return False

        self.samples_consumed += 1

        if self.home.valid:
            self._update_home(sample)

        if self.previous_fix is not None:
            self._accumulate(self.previous_fix, sample)

        self.previous_fix = PreviousFix(sample.lat, sample.lon, sample.altitude)
        return True

    def _update_home(self, sample: GpsSample):
        """Refresh bearing and distance from the current position to home."""
        home = self.home.coordinate
        self.flight_state.home_bearing = bearing(sample.lat, sample.lon,
                                                 home.lat, home.lon)
        self.flight_state.home_distance = distance_2d(sample.lat, sample.lon,
                                                      home.lat, home.lon) / CM_PER_KM

    def _accumulate(self, previous: PreviousFix, sample: GpsSample):
        """Add the leg from previous to sample if its speed is plausible."""
        leg = distance_3d(previous.lat, previous.lon, previous.altitude,
                          sample.lat, sample.lon, sample.altitude)

        calc_speed = int(leg / CM_PER_M / self.config.sample_interval_s * MPS_TO_KNOTS)

        if (abs(calc_speed - sample.ground_speed) < self.config.max_speed_diff
                and sample.ground_speed > self.config.min_speed):
            self.flight_state.odometer += leg
            self.samples_accepted += 1
            logger.debug(f"Leg accepted: {leg}cm, speed {calc_speed}kn "
                         f"(gps {sample.ground_speed:.2f}kn)")
        else:
            self.samples_rejected += 1
            logger.debug(f"Leg dropped: {leg}cm, speed {calc_speed}kn "
                         f"(gps {sample.ground_speed:.2f}kn)")

    @property
    def has_previous_fix(self) -> bool:
        return self.previous_fix is not None

    def get_stats(self) -> dict:
        """Get odometer statistics."""
        return {
            'samples_consumed': self.samples_consumed,
            'samples_accepted': self.samples_accepted,
            'samples_rejected': self.samples_rejected,
            'has_previous_fix': self.has_previous_fix,
            'odometer_cm': self.flight_state.odometer,
            'odometer_km': self.flight_state.odometer_km
        }
