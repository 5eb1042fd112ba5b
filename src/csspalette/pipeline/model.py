"""Pipeline output models: Combination and Palette."""

from __future__ import annotations

from dataclasses import dataclass

from csspalette.colors.model import CanonicalColor
from csspalette.contrast import wcag_rating

ColorValue = str  # raw value in source syntax, unvalidated
ColorSet = tuple[CanonicalColor, ...]


@dataclass(frozen=True)
class Combination:
    """A foreground/background pair and its contrast ratio."""

    foreground: CanonicalColor
    background: CanonicalColor
    contrast: float

    @property
    def rating(self) -> str:
        return wcag_rating(self.contrast)

    def to_dict(self) -> dict[str, object]:
        return {
            "foreground": self.foreground,
            "background": self.background,
            "contrast": self.contrast,
            "rating": self.rating,
        }


CombinationSet = tuple[Combination, ...]


@dataclass(frozen=True)
class Palette:
    """Everything one run of the pipeline produces.

    ``skipped`` holds the raw values found on color properties that did not
    normalize to a color, in source order.
    """

    colors: ColorSet
    combinations: CombinationSet
    threshold: float = 1.0
    skipped: tuple[ColorValue, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "colors": list(self.colors),
            "combinations": [c.to_dict() for c in self.combinations],
            "threshold": self.threshold,
            "skipped": list(self.skipped),
        }
