"""Lark-based parser for the rgb()/rgba()/hsl()/hsla() color functions."""

from __future__ import annotations

import colorsys
import functools
import math
import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from csspalette.colors.model import ColorFunction, Component, Rgb
from csspalette.errors import ColorSyntaxError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Trailing unit of a DIMENSION token: "deg", "%", ... (digits never end a unit)
_UNIT_RE = re.compile(r"(?:[a-z]+|%)\Z", re.IGNORECASE)

# Angle units accepted for hue, expressed as degrees per unit.
_ANGLE_UNITS: dict[str, float] = {
    "": 1.0,
    "deg": 1.0,
    "rad": 180.0 / math.pi,
    "grad": 0.9,
    "turn": 360.0,
}


class ColorFunctionTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a ColorFunction."""

    def component(self, items: list[Token]) -> Component:
        token = items[0]
        if token.type == "NONE":
            return Component(0.0, "none")
        text = str(token)
        unit = _UNIT_RE.search(text)
        suffix = unit.group() if unit else ""
        return Component(float(text[: len(text) - len(suffix)]), suffix.lower())

    def comma_args(self, items: list[Component]) -> ColorFunction:
        return ColorFunction(name="", components=tuple(items), legacy=True)

    def space_args(self, items: list[object]) -> ColorFunction:
        components: list[Component] = []
        alpha: Component | None = None
        after_slash = False
        for item in items:
            if isinstance(item, Token):
                after_slash = True
            elif after_slash:
                alpha = item  # type: ignore[assignment]
            else:
                components.append(item)  # type: ignore[arg-type]
        return ColorFunction(name="", components=tuple(components), alpha=alpha)

    def start(self, items: list[object]) -> ColorFunction:
        name = str(items[0]).rstrip("(").lower().rstrip("a")
        args: ColorFunction = items[1]  # type: ignore[assignment]
        return ColorFunction(
            name=name,
            components=args.components,
            alpha=args.alpha,
            legacy=args.legacy,
        )


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_function(source: str) -> ColorFunction:
    """Parse a color function call, checking arity but not units.

    Raises ColorSyntaxError when the text does not match the grammar or has
    the wrong number of components.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        raise ColorSyntaxError(source, "unrecognized function syntax", cause=e) from e
    func: ColorFunction = ColorFunctionTransformer().transform(tree)

    components, alpha = func.components, func.alpha
    if func.legacy and len(components) == 4:
        components, alpha = components[:3], components[3]
    if len(components) != 3:
        raise ColorSyntaxError(
            source, f"expected 3 components, got {len(func.components)}"
        )
    return ColorFunction(
        name=func.name, components=components, alpha=alpha, legacy=func.legacy
    )


# ---------------------------------------------------------------------------
# Component conversion
# ---------------------------------------------------------------------------


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _to_byte(fraction: float) -> int:
    """Scale 0-1 to 0-255, rounding half up."""
    return int(math.floor(_clamp(fraction, 0.0, 1.0) * 255 + 0.5))


def _rgb_channel(source: str, comp: Component) -> float:
    """Return a 0-1 channel value from a number (0-255) or percentage."""
    if comp.unit == "none":
        return 0.0
    if comp.unit == "":
        return comp.value / 255
    if comp.unit == "%":
        return comp.value / 100
    raise ColorSyntaxError(source, f"unexpected unit {comp.unit!r} in rgb channel")


def _hue(source: str, comp: Component) -> float:
    """Return the hue as a 0-1 fraction of a turn."""
    if comp.unit == "none":
        return 0.0
    if comp.unit not in _ANGLE_UNITS:
        raise ColorSyntaxError(source, f"unexpected unit {comp.unit!r} for hue")
    return (comp.value * _ANGLE_UNITS[comp.unit]) % 360.0 / 360.0


def _percentage(source: str, comp: Component) -> float:
    """Return saturation/lightness as a 0-1 fraction."""
    if comp.unit == "none":
        return 0.0
    if comp.unit not in ("", "%"):
        raise ColorSyntaxError(source, f"unexpected unit {comp.unit!r} for percentage")
    return _clamp(comp.value, 0.0, 100.0) / 100


def _check_alpha(source: str, comp: Component | None) -> None:
    # Alpha is validated but never used: canonical colors are opaque.
    if comp is not None and comp.unit not in ("", "%", "none"):
        raise ColorSyntaxError(source, f"unexpected unit {comp.unit!r} for alpha")


def function_to_rgb(source: str) -> Rgb:
    """Convert an ``rgb()``/``hsl()`` call to an opaque Rgb."""
    func = parse_function(source)
    _check_alpha(source, func.alpha)
    first, second, third = func.components
    if func.name == "rgb":
        channels = [_rgb_channel(source, c) for c in func.components]
    else:
        r, g, b = colorsys.hls_to_rgb(
            _hue(source, first), _percentage(source, third), _percentage(source, second)
        )
        channels = [r, g, b]
    return Rgb(*(_to_byte(c) for c in channels))
