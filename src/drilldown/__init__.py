"""
DrillDown - turn a long list into an easy-to-navigate tree.

Groups a flat list into buckets keyed by progressively longer prefixes (or
any other key function), using the least specific key that keeps every
bucket under a size limit.
"""

__version__ = "0.6.0"

from .builder import TOP_LEVEL_KEY, DrillDown, Tree
from .config import DrillDownConfig, load_config
from .exceptions import ConfigurationError, DrillDownError, InvalidConfigError
from .slicers import SLICERS, get_slicer, normalized_prefix_slicer, prefix_slicer

__all__ = [
    "DrillDown",  # Main entry point
    "Tree",
    "TOP_LEVEL_KEY",
    "DrillDownConfig",
    "load_config",
    "DrillDownError",
    "ConfigurationError",
    "InvalidConfigError",
    "SLICERS",
    "get_slicer",
    "prefix_slicer",
    "normalized_prefix_slicer",
]
