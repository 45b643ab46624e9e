"""Configuration exceptions: thresholds, depth, slicer selection."""

from typing import Any, Optional

from .base import DrillDownError


class ConfigurationError(DrillDownError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is rejected."""

    def __init__(self, key: str, value: Any, reason: str, hint: Optional[str] = None):
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": key, "value": repr(value), "reason": reason},
            hint=hint,
        )
        self.key = key
        self.value = value
        self.reason = reason
