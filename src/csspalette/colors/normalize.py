"""Normalize CSS color values to canonical ``#rrggbb`` strings."""

from __future__ import annotations

import logging
import re

import webcolors

from csspalette.colors.functions import function_to_rgb
from csspalette.colors.model import CanonicalColor, Rgb
from csspalette.errors import ColorSyntaxError, NotAColorError

log = logging.getLogger(__name__)

# Keywords that are valid color values but not absolute colors.
NON_COLOR_KEYWORDS = frozenset(
    {
        "inherit",
        "initial",
        "unset",
        "revert",
        "revert-layer",
        "currentcolor",
        "transparent",
    }
)

# CSS Color 4 names missing from the CSS3 table webcolors uses.
EXTRA_NAMED_COLORS: dict[str, str] = {"rebeccapurple": "#663399"}

_HEX_RE = re.compile(r"#(?P<digits>[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})")
_FUNCTION_RE = re.compile(r"(?P<name>rgba?|hsla?)\s*\(")


def _from_hex(digits: str) -> Rgb:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    return Rgb.from_hex(digits[:6])


def parse_color(value: str) -> Rgb:
    """Parse a CSS color value into an opaque Rgb.

    Raises NotAColorError for keywords such as ``inherit`` or ``var(--x)``
    and for unknown words, and ColorSyntaxError for color functions with
    the wrong arity or units.
    """
    text = value.strip().lower()
    if not text or text in NON_COLOR_KEYWORDS or text.startswith("var("):
        raise NotAColorError(value)

    match = _HEX_RE.fullmatch(text)
    if match:
        return _from_hex(match.group("digits"))
    if text.startswith("#"):
        raise ColorSyntaxError(value, "hex colors need 3, 4, 6 or 8 digits")

    if _FUNCTION_RE.match(text):
        return function_to_rgb(text)

    if text in EXTRA_NAMED_COLORS:
        return Rgb.from_hex(EXTRA_NAMED_COLORS[text])
    try:
        return Rgb.from_hex(webcolors.name_to_hex(text))
    except ValueError as e:
        raise NotAColorError(value, cause=e) from e


def normalize(value: str) -> CanonicalColor | None:
    """Return the canonical ``#rrggbb`` form of *value*, or None.

    None means "not a color" and is never an error: keywords, variable
    references and malformed syntax are all skipped the same way.
    """
    try:
        return parse_color(value).hex
    except NotAColorError:
        log.debug("Skipping non-color value %r", value)
    except ColorSyntaxError as e:
        log.debug("Skipping malformed color %r: %s", value, e.reason)
    return None
