from csspalette.colors.model import CanonicalColor, Rgb
from csspalette.colors.normalize import NON_COLOR_KEYWORDS, normalize, parse_color

__all__ = ["CanonicalColor", "Rgb", "NON_COLOR_KEYWORDS", "normalize", "parse_color"]
