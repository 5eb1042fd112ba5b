from __future__ import annotations

from dataclasses import dataclass

MIN_CONTRAST = 1.0
MAX_CONTRAST = 21.0


@dataclass(frozen=True)
class PaletteConfig:
    threshold: float = 1.0  # minimum contrast ratio, inclusive
    properties: tuple[str, ...] = ("color", "background-color")
    title: str = "Color report"
    timeout: float = 10.0  # seconds, for stylesheets fetched over HTTP

    def __post_init__(self) -> None:
        if not MIN_CONTRAST <= self.threshold <= MAX_CONTRAST:
            raise ValueError(
                f"threshold must be between {MIN_CONTRAST} and {MAX_CONTRAST}, "
                f"got {self.threshold}"
            )
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if not self.properties:
            raise ValueError("properties must not be empty")
