# GPS Odometer - Source Package
"""
GPS Odometer: distance and home readouts for a periodically sampled GPS.

Modules:
    - utils: Helper utilities (flat-earth geo math, YAML config)
    - flight: GPS sample store, flight readouts, odometer updater
"""

__version__ = "1.0.0"
__author__ = "GPS Odometer Team"
