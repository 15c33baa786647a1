"""
Simulation Module for the GPS Odometer

Provides mock GPS tracks for testing without a real receiver.
"""

from simulation.mock_gps import MockGpsTrack

__all__ = [
    'MockGpsTrack'
]
