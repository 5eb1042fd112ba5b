"""Error hierarchy for css-palette."""
from __future__ import annotations


class PaletteError(Exception):
    """Base error for all csspalette errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Color errors (never escape the pipeline)
# ---------------------------------------------------------------------------


class NotAColorError(PaletteError):
    """The value is not an absolute color (``inherit``, ``var(--x)``, ...)."""

    def __init__(self, value: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Not a color: {value!r}", cause=cause)
        self.value = value


class ColorSyntaxError(PaletteError):
    """The value looks like a color function but has bad arity or units."""

    def __init__(
        self, value: str, reason: str, *, cause: Exception | None = None
    ) -> None:
        super().__init__(f"Malformed color {value!r}: {reason}", cause=cause)
        self.value = value
        self.reason = reason


# ---------------------------------------------------------------------------
# I/O errors
# ---------------------------------------------------------------------------


class SourceError(PaletteError):
    """A stylesheet could not be read from a path or fetched from a URL."""

    def __init__(
        self, message: str, *, location: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.location = location
