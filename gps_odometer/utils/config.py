"""
Config - YAML Parameter Loading

Loads odometer parameters from a YAML file and merges them over the
built-in defaults.
"""

import os
import copy
import logging
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    'odometer': {
        'max_speed_diff_kmh': 10.0,   # reject when computed/GPS speed differ more
        'min_speed_kmh': 1.0,         # reject when GPS reports slower than this
        'sample_interval_s': 1.0,     # time between two GPS samples
    },
    'home': {
        'enabled': False,
        'lat': 0.0,
        'lon': 0.0,
    },
}


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base (override wins)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            merge_config(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: str = None) -> Dict[str, Any]:
    """
    Load configuration, falling back to defaults.

    Args:
        path: Path to a YAML file, or None for defaults only

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file does not contain a mapping
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r') as f:
        file_config = yaml.safe_load(f)

    if file_config is None:
        logger.warning(f"Config file {path} is empty, using defaults")
        return config

    if not isinstance(file_config, dict):
        raise ValueError(f"Config file {path} must contain a mapping, "
                         f"got {type(file_config).__name__}")

    merge_config(config, file_config)
    logger.info(f"Configuration loaded from {path}")
    return config
