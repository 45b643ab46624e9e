"""Key functions ("slicers") that summarise an item at a given level.

A slicer takes a level (0 = top) and an item and returns the key of the
bucket the item belongs to at that level. Keys at deeper levels should be
more specific than keys at shallower ones, otherwise splitting a bucket
cannot make it smaller.

    prefix_slicer(2, "AARON")            -> "AA"
    normalized_prefix_slicer(3, "O'Brien") -> "obr"
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, Hashable

from .exceptions import InvalidConfigError

Slicer = Callable[[int, Any], Hashable]

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]")


def prefix_slicer(level: int, item: Any) -> str:
    """Truncate the item's string form to ``level`` characters."""
    return str(item)[:level]


def normalized_prefix_slicer(level: int, item: Any) -> str:
    """Like :func:`prefix_slicer`, ignoring case and non-alphanumerics.

    Useful for human names, where "O'Brien", "OBrien" and "obrien" should
    land in the same bucket.
    """
    return _NON_ALNUM.sub("", str(item)).lower()[:level]


SLICERS: Dict[str, Slicer] = {
    "prefix": prefix_slicer,
    "normalized": normalized_prefix_slicer,
}

DEFAULT_SLICER = "prefix"


def get_slicer(name: str) -> Slicer:
    """Look up a registered slicer by name.

    Raises:
        InvalidConfigError: If no slicer is registered under ``name``.
    """
    try:
        return SLICERS[name]
    except (KeyError, TypeError):
        known = ", ".join(sorted(SLICERS))
        raise InvalidConfigError(
            "slicer",
            name,
            f"expected one of: {known}",
            hint="pass a callable (level, item) -> key to use a custom slicer",
        ) from None
