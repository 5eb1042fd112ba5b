"""Build the deduplicated color set from raw color values."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from csspalette.colors import normalize
from csspalette.pipeline.model import ColorSet, ColorValue

log = logging.getLogger(__name__)


def partition_values(
    values: Iterable[ColorValue],
) -> tuple[ColorSet, tuple[ColorValue, ...]]:
    """Split *values* into the color set and the values that were skipped.

    The color set keeps the first occurrence of each canonical color.
    """
    seen: dict[str, None] = {}
    skipped: list[ColorValue] = []
    for value in values:
        canonical = normalize(value)
        if canonical is None:
            skipped.append(value)
        else:
            seen.setdefault(canonical, None)
    if skipped:
        log.info("Skipped %d non-color value(s)", len(skipped))
    return tuple(seen), tuple(skipped)


def build_color_set(values: Iterable[ColorValue]) -> ColorSet:
    """Normalize, drop non-colors and deduplicate in first-seen order."""
    colors, _ = partition_values(values)
    return colors
