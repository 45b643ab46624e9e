"""Configuration loading and validation for DrillDown.

Configuration sources are merged in priority order (lowest to highest):
    1. Defaults (defined in DrillDownConfig)
    2. Global config (~/.drilldown.toml)
    3. Project config (./drilldown.toml)
    4. Explicit config file
    5. Environment variables (DRILLDOWN_* prefix)
    6. Keyword overrides

Example:
    >>> config = load_config(max_items=[64, 32, 16])
    >>> config.threshold_for(0), config.threshold_for(5)
    (64, 16)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

from .exceptions import ConfigurationError, InvalidConfigError
from .slicers import DEFAULT_SLICER, Slicer, get_slicer

DEFAULT_MAX_ITEMS = 32
DEFAULT_MAX_DEPTH = 8

ENV_PREFIX = "DRILLDOWN_"


def _is_int(value: Any) -> bool:
    # bool is an int subclass but True/False are never sensible sizes
    return isinstance(value, int) and not isinstance(value, bool)


def normalize_max_items(value: Union[int, Sequence[int]]) -> Tuple[int, ...]:
    """Coerce a single threshold or a per-level sequence into a tuple.

    Raises:
        InvalidConfigError: If the sequence is empty or holds anything other
            than positive integers.
    """
    if _is_int(value):
        thresholds: Tuple[Any, ...] = (value,)
    elif isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidConfigError(
            "max_items", value, "expected a positive integer or a list of them"
        )
    else:
        thresholds = tuple(value)

    if not thresholds:
        raise InvalidConfigError("max_items", value, "at least one threshold is required")
    for threshold in thresholds:
        if not _is_int(threshold) or threshold < 1:
            raise InvalidConfigError(
                "max_items", value, f"thresholds must be positive integers, got {threshold!r}"
            )
    return thresholds


@dataclass(frozen=True)
class DrillDownConfig:
    """Settings for a DrillDown builder.

    Attributes:
        max_items: Largest bucket allowed at each level. A single integer
            applies to every level; a sequence gives per-level values and the
            last entry applies to every deeper level. Always stored as a tuple.
        max_depth: Highest level passed to the slicer. Buckets still too big
            at this level are kept as they are.
        slicer: Name of a registered slicer (see ``drilldown.slicers``) or a
            callable ``(level, item) -> key``.
    """

    max_items: Union[int, Tuple[int, ...]] = DEFAULT_MAX_ITEMS
    max_depth: int = DEFAULT_MAX_DEPTH
    slicer: Union[str, Slicer] = DEFAULT_SLICER

    def __post_init__(self) -> None:
        """Normalize thresholds and validate the rest."""
        object.__setattr__(self, "max_items", normalize_max_items(self.max_items))

        if not _is_int(self.max_depth) or self.max_depth < 0:
            raise InvalidConfigError(
                "max_depth", self.max_depth, "must be a non-negative integer"
            )

        if not callable(self.slicer):
            get_slicer(self.slicer)

    def resolve_slicer(self) -> Slicer:
        """The slicer callable, looking registered names up in ``SLICERS``."""
        if callable(self.slicer):
            return self.slicer
        return get_slicer(self.slicer)

    def threshold_for(self, level: int) -> int:
        """Bucket size limit at ``level``, clamped to the last configured value."""
        if level < len(self.max_items):
            return self.max_items[level]
        return self.max_items[-1]


DEFAULT_CONFIG = DrillDownConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> DrillDownConfig:
    """Load configuration with auto-discovery and merging.

    TOML files put the settings either at top level or under a
    ``[drilldown]`` table, not both.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides, applied last

    Returns:
        Validated DrillDownConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable, or a
            value is invalid.
    """
    merged: dict = {}

    global_config = Path.home() / ".drilldown.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "drilldown.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}", details={"path": str(config_file)}
            )
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())
    merged.update(overrides)

    try:
        return DrillDownConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}", details={"path": str(path)})

    if "drilldown" not in data:
        return dict(data)

    section = data["drilldown"]
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Invalid {label} '{path}': [drilldown] must be a table", details={"path": str(path)}
        )
    stray = sorted(key for key in data if key != "drilldown")
    if stray:
        raise ConfigurationError(
            f"Invalid {label} '{path}': settings outside the [drilldown] table",
            details={"path": str(path), "keys": ", ".join(stray)},
            hint="move them into the [drilldown] table or drop the table header",
        )
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DRILLDOWN_* environment variables.

    Supported environment variables:
        DRILLDOWN_MAX_ITEMS: int, or comma-separated ints for per-level limits
        DRILLDOWN_MAX_DEPTH: int
        DRILLDOWN_SLICER: registered slicer name

    Returns:
        Dict of field_name -> parsed_value for any DRILLDOWN_* vars found.
    """
    result: dict[str, Any] = {}

    for f in fields(DrillDownConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[f.name] = _parse_env_value(env_value, f.name)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}", details={"variable": env_key})

    return result


def _parse_env_value(value: str, field_name: str) -> Any:
    """Parse an environment variable string for ``field_name``.

    Raises:
        ValueError: If value can't be parsed to the expected type
    """
    if field_name == "max_items":
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if not parts:
            raise ValueError(f"expected one or more integers, got '{value}'")
        ints = [int(part) for part in parts]
        return ints[0] if len(ints) == 1 else tuple(ints)

    if field_name == "max_depth":
        return int(value.strip())

    return value.strip()


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If neither tomllib nor tomli is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package.",
                hint="pip install tomli",
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
