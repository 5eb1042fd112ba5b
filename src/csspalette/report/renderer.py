"""Render a Palette as an HTML report with Jinja2."""

from __future__ import annotations

import functools
import logging
from pathlib import Path

from jinja2 import Environment, PackageLoader, select_autoescape

from csspalette.pipeline.model import Palette

log = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("csspalette.report", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_report(
    palette: Palette, *, title: str = "Color report", source: str = ""
) -> str:
    """Return the HTML report for *palette*."""
    template = _environment().get_template("report.html")
    return template.render(
        title=title,
        source=source,
        colors=palette.colors,
        combinations=palette.combinations,
        threshold=palette.threshold,
        skipped=palette.skipped,
    )


def write_report(
    palette: Palette,
    path: str | Path,
    *,
    title: str = "Color report",
    source: str = "",
) -> Path:
    """Render *palette* and write it to *path* as UTF-8."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_report(palette, title=title, source=source), encoding="utf-8")
    log.info("Wrote report %s", out)
    return out
