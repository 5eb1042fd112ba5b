"""css-palette: extract colors from CSS and rank foreground/background contrast."""

__version__ = "0.1.0"

from csspalette.colors import CanonicalColor, Rgb, normalize, parse_color  # noqa: E402
from csspalette.config import PaletteConfig  # noqa: E402
from csspalette.contrast import contrast_ratio, relative_luminance, wcag_rating  # noqa: E402
from csspalette.errors import (  # noqa: E402
    ColorSyntaxError,
    NotAColorError,
    PaletteError,
    SourceError,
)
from csspalette.pipeline import (  # noqa: E402
    COLOR_PROPERTIES,
    Combination,
    Palette,
    analyze,
    analyze_stylesheet,
    build_color_set,
    extract_color_values,
    rank_combinations,
)
from csspalette.stylesheet import Declaration, parse_declarations  # noqa: E402

__all__ = [
    "__version__",
    "CanonicalColor",
    "COLOR_PROPERTIES",
    "ColorSyntaxError",
    "Combination",
    "Declaration",
    "NotAColorError",
    "Palette",
    "PaletteConfig",
    "PaletteError",
    "Rgb",
    "SourceError",
    "analyze",
    "analyze_stylesheet",
    "build_color_set",
    "contrast_ratio",
    "extract_color_values",
    "normalize",
    "parse_color",
    "rank_combinations",
    "relative_luminance",
    "wcag_rating",
]
