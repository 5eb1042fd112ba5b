from csspalette.stylesheet.parser import parse_declarations
from csspalette.stylesheet.model import Declaration

__all__ = ["parse_declarations", "Declaration"]
