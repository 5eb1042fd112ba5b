"""Stylesheet model: the Declaration dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair from a stylesheet.

    ``source_order`` is the zero-based position of the declaration in the
    document; downstream stages use it for first-seen ordering.
    """

    property: str
    value: str
    source_order: int
