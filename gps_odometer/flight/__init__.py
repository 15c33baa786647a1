# Flight - GPS Consumers
"""
Flight state maintained from the GPS stream.

Modules:
    - gps_data: Current GPS sample and per-consumer "new sample" flags
    - flight_state: Home position and flight readouts
    - odometer: Per-sample odometer and home readout updater
"""

from .gps_data import GeoCoordinate, GpsConsumer, GpsSample, GpsStore
from .flight_state import FlightState, HomePosition
from .odometer import Odometer, OdometerConfig, PreviousFix

__all__ = [
    "GeoCoordinate",
    "GpsConsumer",
    "GpsSample",
    "GpsStore",
    "FlightState",
    "HomePosition",
    "Odometer",
    "OdometerConfig",
    "PreviousFix"
]
