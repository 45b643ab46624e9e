"""Exception hierarchy for DrillDown."""

from .base import DrillDownError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "DrillDownError",
    "ConfigurationError",
    "InvalidConfigError",
]
