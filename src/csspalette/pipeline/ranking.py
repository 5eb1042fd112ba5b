"""Rank foreground/background combinations by contrast."""

from __future__ import annotations

from collections.abc import Sequence

from csspalette.colors.model import CanonicalColor
from csspalette.contrast import contrast_ratio
from csspalette.pipeline.model import Combination, CombinationSet


def enumerate_pairs(colors: Sequence[CanonicalColor]) -> list[Combination]:
    """Every ordered pair, self-pairs included.

    The outer loop picks the foreground and the inner loop the background,
    both in color set order.
    """
    return [
        Combination(foreground=fg, background=bg, contrast=contrast_ratio(fg, bg))
        for fg in colors
        for bg in colors
    ]


def rank_combinations(
    colors: Sequence[CanonicalColor], threshold: float = 1.0
) -> CombinationSet:
    """Pairs with contrast >= *threshold*, highest contrast first.

    Ties keep their enumeration order.
    """
    kept = [c for c in enumerate_pairs(colors) if c.contrast >= threshold]
    return tuple(sorted(kept, key=lambda c: c.contrast, reverse=True))
