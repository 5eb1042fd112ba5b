"""WCAG 2.0 relative luminance and contrast ratio."""

from __future__ import annotations

from csspalette.colors.model import CanonicalColor, Rgb

# (minimum ratio, rating), highest first
WCAG_LEVELS: tuple[tuple[float, str], ...] = (
    (7.0, "AAA"),
    (4.5, "AA"),
    (3.0, "AA Large"),
)


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: CanonicalColor | Rgb) -> float:
    """Relative luminance in [0, 1] of a ``#rrggbb`` string or Rgb."""
    rgb = color if isinstance(color, Rgb) else Rgb.from_hex(color)
    return (
        0.2126 * _linearize(rgb.red)
        + 0.7152 * _linearize(rgb.green)
        + 0.0722 * _linearize(rgb.blue)
    )


def contrast_ratio(first: CanonicalColor | Rgb, second: CanonicalColor | Rgb) -> float:
    """Contrast ratio in [1, 21]. Symmetric in its arguments."""
    lum_a = relative_luminance(first)
    lum_b = relative_luminance(second)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_rating(ratio: float) -> str:
    """Map a contrast ratio to "AAA", "AA", "AA Large" or "Fail"."""
    for minimum, rating in WCAG_LEVELS:
        if ratio >= minimum:
            return rating
    return "Fail"
