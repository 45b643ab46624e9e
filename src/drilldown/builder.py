"""DrillDown: turn a long flat list into an easy-to-navigate tree.

Items start in one top-level bucket keyed by ``""``. Level by level, every
bucket holding more than that level's threshold is dissolved and its items
are re-bucketed under ``slicer(level, item)``. The result maps keys to the
least specific bucket that is small enough:

    >>> DrillDown(max_items=1).generate(["AB", "AC", "B"])
    {'B': ['B'], 'AB': ['AB'], 'AC': ['AC']}

The tree is flat. Nesting is implied by the keys (``"AB"`` sits under
``"A"`` for a prefix slicer) and is left to the consumer to present.

A bucket can still exceed its threshold if ``max_depth`` is reached first,
for example when many items share a long common prefix. Such buckets are
returned as they are.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Union

from .config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ITEMS, DrillDownConfig
from .exceptions import InvalidConfigError
from .logging_config import get_logger
from .slicers import DEFAULT_SLICER, Slicer

logger = get_logger(__name__)

Tree = Dict[Hashable, List[Any]]

TOP_LEVEL_KEY = ""


class DrillDown:
    """Builds drill-down trees from flat lists.

    Configuration is fixed at construction and validated there; ``generate``
    keeps no state between calls, so one instance can serve many lists.

    Args:
        slicer: Callable ``(level, item) -> key`` or the name of a registered
            slicer. Defaults to prefix truncation of ``str(item)``.
        max_items: Largest bucket allowed, either one value for every level
            or a per-level sequence whose last entry covers deeper levels.
        max_depth: Highest level passed to the slicer.

    Raises:
        InvalidConfigError: If any setting is invalid.
    """

    def __init__(
        self,
        slicer: Optional[Union[Slicer, str]] = None,
        max_items: Union[int, Sequence[int]] = DEFAULT_MAX_ITEMS,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if slicer is None:
            slicer = DEFAULT_SLICER
        elif not isinstance(slicer, str) and not callable(slicer):
            raise InvalidConfigError("slicer", slicer, "must be callable or a slicer name")

        self.config = DrillDownConfig(max_items=max_items, max_depth=max_depth, slicer=slicer)
        self.slicer: Slicer = self.config.resolve_slicer()

    @classmethod
    def from_config(
        cls, config: DrillDownConfig, slicer: Optional[Slicer] = None
    ) -> "DrillDown":
        """Build from a loaded config; an explicit ``slicer`` wins over ``config.slicer``."""
        return cls(
            slicer=slicer if slicer is not None else config.slicer,
            max_items=config.max_items,
            max_depth=config.max_depth,
        )

    @property
    def max_items(self) -> tuple:
        return self.config.max_items

    @property
    def max_depth(self) -> int:
        return self.config.max_depth

    def threshold_for(self, level: int) -> int:
        return self.config.threshold_for(level)

    def generate(self, items: Iterable[Any]) -> Tree:
        """Partition ``items`` into buckets no larger than the level thresholds.

        Args:
            items: Items to group. Anything the slicer accepts.

        Returns:
            A new dict mapping each key to the list of items in that bucket.
            Every input item appears in exactly one bucket.

        Raises:
            Exception: Whatever the slicer raises, unchanged. No partial tree
                is returned.
        """
        tree: Tree = {TOP_LEVEL_KEY: list(items)}
        level = 0

        for level in range(self.max_depth + 1):
            threshold = self.threshold_for(level)
            split_count = 0

            # Buckets created at this level are not revisited until the next one
            for key in list(tree):
                bucket = tree[key]
                if len(bucket) <= threshold:
                    continue

                del tree[key]
                split_count += 1
                for item in bucket:
                    tree.setdefault(self.slicer(level, item), []).append(item)

            logger.debug(
                "Level %d: threshold %d, split %d bucket(s), %d bucket(s) total",
                level,
                threshold,
                split_count,
                len(tree),
            )

            if not split_count:
                break
        else:
            oversized = sum(1 for bucket in tree.values() if len(bucket) > self.threshold_for(level))
            if oversized:
                logger.debug(
                    "Reached max_depth %d with %d bucket(s) over threshold", self.max_depth, oversized
                )

        logger.debug("Generated %d bucket(s), deepest level %d", len(tree), level)
        return tree

    def __repr__(self) -> str:
        slicer_name = getattr(self.slicer, "__name__", repr(self.slicer))
        return (
            f"{type(self).__name__}(slicer={slicer_name}, "
            f"max_items={list(self.max_items)}, max_depth={self.max_depth})"
        )
