"""Select the raw values of color properties from a declaration sequence."""

from __future__ import annotations

from collections.abc import Iterable

from csspalette.pipeline.model import ColorValue
from csspalette.stylesheet.model import Declaration

COLOR_PROPERTIES = frozenset({"color", "background-color"})


def extract_color_values(
    declarations: Iterable[Declaration],
    properties: Iterable[str] = COLOR_PROPERTIES,
) -> list[ColorValue]:
    """Return the values of declarations whose property is in *properties*.

    Property names match exactly, ignoring case and surrounding whitespace,
    so ``border-color`` and the ``background`` shorthand are not picked up.
    Output order is input order.
    """
    wanted = {p.strip().lower() for p in properties}
    return [d.value for d in declarations if d.property.strip().lower() in wanted]
