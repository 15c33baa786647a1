"""
FlightState - Readouts Maintained From the GPS Stream

Home bearing, home distance and the odometer. The odometer is only ever
increased; nothing in this package resets it.
"""

from dataclasses import dataclass

from .gps_data import GeoCoordinate
from ..utils.geo_math import CM_PER_KM


@dataclass(frozen=True)
class HomePosition:
    """Configured home coordinate, used only while valid."""
    coordinate: GeoCoordinate = GeoCoordinate(0, 0)
    valid: bool = False

    @classmethod
    def from_config(cls, config: dict = None) -> "HomePosition":
        """
        Build the home position from the 'home' config section.

        Args:
            config: Dictionary with keys:
                - enabled: Whether the home position is valid
                - lat: Home latitude (degrees)
                - lon: Home longitude (degrees)
        """
        config = config or {}
        if not isinstance(config, dict):
            raise ValueError(f"home config must be a mapping, got {type(config).__name__}")

        try:
            coordinate = GeoCoordinate.from_degrees(
                float(config.get('lat', 0.0)),
                float(config.get('lon', 0.0))
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Invalid home config value: {e}") from e

        return cls(
            coordinate=coordinate,
            valid=bool(config.get('enabled', False))
        )


@dataclass
class FlightState:
    """Values written by the odometer updater."""
    home_bearing: int = 0         # degrees, 0-359
    home_distance: float = 0.0    # km
    odometer: int = 0             # cm

    @property
    def odometer_km(self) -> float:
        """Odometer reading in kilometers."""
        return self.odometer / CM_PER_KM
