#!/usr/bin/env python3
"""
Odometer Replay - Run Recorded or Simulated GPS Tracks Through the Odometer

This script feeds a GPS track into the odometer one sample per cycle:
1. Load odometer/home parameters from YAML
2. Read a recorded track (CSV) or generate a simulated one
3. Publish each sample and step the odometer
4. Report odometer, home bearing/distance and filter statistics

Track CSV columns: lat,lon,alt,speed_knots (degrees, meters, knots)

Usage:
    python odometer_replay.py [--config CONFIG_PATH] (--track CSV | --simulate N) [--verbose]
"""

import os
import csv
import sys
import logging
import argparse
from pathlib import Path
from typing import List

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gps_odometer.flight import (
    FlightState, GeoCoordinate, GpsSample, GpsStore, HomePosition,
    Odometer, OdometerConfig
)
from gps_odometer.utils.config import load_config
from simulation.mock_gps import MockGpsTrack

logger = logging.getLogger('OdometerReplay')

TRACK_COLUMNS = ('lat', 'lon', 'alt', 'speed_knots')


def read_track(path: str) -> List[GpsSample]:
    """
    Read a recorded GPS track.

    Args:
        path: Path to a CSV file with columns lat,lon,alt,speed_knots

    Returns:
        List of GpsSample in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a column is missing or a row cannot be parsed
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Track file not found: {path}")

    samples = []
    with open(path, 'r', newline='') as f:
        reader = csv.DictReader(f)
        missing = [c for c in TRACK_COLUMNS if c not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"Track {path} is missing columns: {', '.join(missing)}")

        for line_no, row in enumerate(reader, start=2):
            try:
                samples.append(GpsSample(
                    coordinate=GeoCoordinate.from_degrees(float(row['lat']), float(row['lon'])),
                    altitude=float(row['alt']),
                    ground_speed=float(row['speed_knots'])
                ))
            except (TypeError, ValueError, OverflowError) as e:
                raise ValueError(f"{path}:{line_no}: bad track row: {e}") from e

    return samples


class OdometerReplay:
    """
    Replays a GPS track through the odometer.

    Mirrors the instrument's main loop: the GPS side publishes one sample,
    then the odometer task runs once.
    """

    def __init__(self, config: dict):
        """
        Initialize replay.

        Args:
            config: Configuration dictionary (see config/odometer_params.yaml)
        """
        self.config = config
        self.gps_store = GpsStore()
        self.flight_state = FlightState()
        self.home = HomePosition.from_config(config.get('home', {}))
        self.odometer = Odometer(
            self.gps_store,
            self.flight_state,
            self.home,
            OdometerConfig.from_dict(config.get('odometer', {}))
        )

    def run(self, samples: List[GpsSample]) -> FlightState:
        """Feed every sample through the odometer."""
        for i, sample in enumerate(samples):
            self.gps_store.publish(sample)
            self.odometer.step()

            logger.debug(f"#{i}: odometer={self.flight_state.odometer}cm, "
                         f"home={self.flight_state.home_bearing}° / "
                         f"{self.flight_state.home_distance:.3f}km")

        return self.flight_state

    def report(self):
        """Log the final readouts."""
        stats = self.odometer.get_stats()
        logger.info(f"Odometer: {stats['odometer_km']:.3f} km ({stats['odometer_cm']} cm)")
        if self.home.valid:
            logger.info(f"Home: bearing {self.flight_state.home_bearing}°, "
                        f"distance {self.flight_state.home_distance:.3f} km")
        else:
            logger.info("Home: not set")
        logger.info(f"Samples: {stats['samples_consumed']} consumed, "
                    f"{stats['samples_accepted']} accepted, "
                    f"{stats['samples_rejected']} dropped")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Replay a GPS track through the odometer")
    parser.add_argument(
        '--config',
        default='config/odometer_params.yaml',
        help="Path to odometer configuration file (relative paths resolve against the repository root)"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--track',
        help="Path to recorded track CSV (lat,lon,alt,speed_knots), relative to the current directory"
    )
    source.add_argument(
        '--simulate',
        type=int,
        metavar='N',
        help='Generate N samples of a simulated straight track'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log every sample'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    # Resolve config path
    script_dir = Path(__file__).parent.parent
    config_path = Path(args.config)
    if not config_path.is_absolute():
        config_path = script_dir / config_path

    try:
        config = load_config(str(config_path))
        replay = OdometerReplay(config)

        if args.track:
            samples = read_track(args.track)
        else:
            lat, lon = replay.home.coordinate.to_degrees()
            track = MockGpsTrack(
                start_lat=lat,
                start_lon=lon,
                interval_s=replay.odometer.config.sample_interval_s,
                seed=0
            )
            samples = list(track.samples(args.simulate))

    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Replaying {len(samples)} samples")
    try:
        replay.run(samples)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")

    replay.report()


if __name__ == '__main__':
    main()
