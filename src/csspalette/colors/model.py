"""Color models: Rgb and the parsed color-function arguments."""

from __future__ import annotations

from dataclasses import dataclass

CanonicalColor = str  # "#rrggbb", lowercase, opaque


@dataclass(frozen=True)
class Rgb:
    """An opaque sRGB color with 0-255 channels."""

    red: int
    green: int
    blue: int

    @property
    def hex(self) -> CanonicalColor:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def from_hex(cls, value: str) -> Rgb:
        """Build from ``#rrggbb`` (the leading ``#`` is optional)."""
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected 6 hex digits, got {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class Component:
    """One numeric argument of a color function.

    ``unit`` is ``""`` for plain numbers, ``"%"``, an angle unit such as
    ``"deg"``, or ``"none"`` for the ``none`` keyword.
    """

    value: float
    unit: str = ""


@dataclass(frozen=True)
class ColorFunction:
    """A parsed ``rgb()``/``hsl()`` call before unit checks."""

    name: str  # lowercase, without the "a" suffix: "rgb" or "hsl"
    components: tuple[Component, ...]
    alpha: Component | None = None
    legacy: bool = False  # comma-separated syntax
