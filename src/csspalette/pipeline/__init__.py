"""Color extraction pipeline: declarations -> color set -> ranked combinations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from csspalette.config import PaletteConfig
from csspalette.pipeline.colorset import build_color_set, partition_values
from csspalette.pipeline.extract import COLOR_PROPERTIES, extract_color_values
from csspalette.pipeline.model import (
    ColorSet,
    ColorValue,
    Combination,
    CombinationSet,
    Palette,
)
from csspalette.pipeline.ranking import enumerate_pairs, rank_combinations
from csspalette.stylesheet import Declaration, parse_declarations

log = logging.getLogger(__name__)


def analyze(
    declarations: Iterable[Declaration],
    threshold: float = 1.0,
    properties: Iterable[str] = COLOR_PROPERTIES,
) -> Palette:
    """Run extraction, normalization and ranking over *declarations*."""
    values = extract_color_values(declarations, properties)
    colors, skipped = partition_values(values)
    combinations = rank_combinations(colors, threshold)
    log.info(
        "Found %d color value(s), %d distinct color(s), %d combination(s) >= %.2f",
        len(values),
        len(colors),
        len(combinations),
        threshold,
    )
    return Palette(
        colors=colors,
        combinations=combinations,
        threshold=threshold,
        skipped=skipped,
    )


def analyze_stylesheet(source: str, config: PaletteConfig | None = None) -> Palette:
    """Parse stylesheet text and run the pipeline with *config*."""
    config = config or PaletteConfig()
    return analyze(
        parse_declarations(source),
        threshold=config.threshold,
        properties=config.properties,
    )


__all__ = [
    "COLOR_PROPERTIES",
    "ColorSet",
    "ColorValue",
    "Combination",
    "CombinationSet",
    "Palette",
    "analyze",
    "analyze_stylesheet",
    "build_color_set",
    "enumerate_pairs",
    "extract_color_values",
    "partition_values",
    "rank_combinations",
]
