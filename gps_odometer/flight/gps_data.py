"""
GpsData - Shared GPS Sample Store

Holds the most recent GPS fix and tracks, per consumer, whether that fix
has been processed yet. Each consumer clears only its own flag so several
subsystems can follow the same GPS stream independently.
"""

from enum import Enum
from typing import Optional, Set, Tuple
from dataclasses import dataclass, field

from ..utils.geo_math import to_fixed, from_fixed


class GpsConsumer(Enum):
    """Subsystems that subscribe to new GPS samples."""
    ODOMETER = "odometer"
    LOGGER = "logger"
    DISPLAY = "display"
    VARIO = "vario"


@dataclass(frozen=True)
class GeoCoordinate:
    """Latitude/longitude as fixed-point integers (degrees * GPS_MULT)."""
    lat: int
    lon: int

    @classmethod
    def from_degrees(cls, lat: float, lon: float) -> "GeoCoordinate":
        return cls(to_fixed(lat), to_fixed(lon))

    def to_degrees(self) -> Tuple[float, float]:
        return (from_fixed(self.lat), from_fixed(self.lon))


@dataclass
class GpsSample:
    """One GPS fix as delivered by the receiver."""
    coordinate: GeoCoordinate
    altitude: float = 0.0       # meters
    ground_speed: float = 0.0   # knots

    @property
    def lat(self) -> int:
        return self.coordinate.lat

    @property
    def lon(self) -> int:
        return self.coordinate.lon


@dataclass
class GpsStore:
    """
    Current GPS sample plus independent "new sample" flags.

    The store does no locking; callers serialize access.
    """
    current: Optional[GpsSample] = None
    sample_count: int = 0
    _pending: Set[GpsConsumer] = field(default_factory=set)

    def publish(self, sample: GpsSample):
        """
        Store a new sample and flag it as unread for every consumer.

        Args:
            sample: The new GPS fix
        """
        self.current = sample
        self.sample_count += 1
        self._pending = set(GpsConsumer)

    def consume(self, consumer: GpsConsumer) -> bool:
        """
        Take the "new sample" flag of one consumer.

        Args:
            consumer: Subscriber asking for the sample

        Returns:
            True if a new sample was waiting (the flag is now cleared)
        """
        if consumer not in self._pending:
            return False
        self._pending.discard(consumer)
        return True

    def is_pending(self, consumer: GpsConsumer) -> bool:
        """Check whether a consumer has an unread sample."""
        return consumer in self._pending
