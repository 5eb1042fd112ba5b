"""css-palette CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys

import click

from csspalette import __version__
from csspalette.config import MAX_CONTRAST, MIN_CONTRAST, PaletteConfig
from csspalette.errors import SourceError
from csspalette.pipeline import Palette, analyze_stylesheet
from csspalette.sources import load_stylesheet

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

threshold_option = click.option(
    "--threshold",
    type=click.FloatRange(MIN_CONTRAST, MAX_CONTRAST),
    default=1.0,
    show_default=True,
    help="Minimum contrast ratio (inclusive) for a combination to be listed",
)


def _configure_logging(verbosity: int) -> None:
    level = _LOG_LEVELS[min(verbosity, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _analyze(stylesheet: str, config: PaletteConfig) -> Palette:
    """Load and analyze *stylesheet*, exiting with code 1 if it can't be read."""
    try:
        source = load_stylesheet(stylesheet, timeout=config.timeout)
    except SourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    return analyze_stylesheet(source, config)


@click.group()
@click.version_option(version=__version__, prog_name="csspalette")
@click.option("-v", "--verbose", count=True, help="Increase log output (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """css-palette - extract colors from a stylesheet and rank contrast."""
    _configure_logging(verbose)


@cli.command()
@click.argument("stylesheet")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array")
def colors(stylesheet: str, as_json: bool) -> None:
    """List the distinct colors in STYLESHEET (a path or URL), first-seen order."""
    palette = _analyze(stylesheet, PaletteConfig())
    if as_json:
        click.echo(json.dumps(list(palette.colors)))
        return
    for color in palette.colors:
        click.echo(color)


@cli.command()
@click.argument("stylesheet")
@threshold_option
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Show at most N pairs")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array")
def pairs(stylesheet: str, threshold: float, limit: int | None, as_json: bool) -> None:
    """List foreground/background pairs in STYLESHEET by descending contrast."""
    palette = _analyze(stylesheet, PaletteConfig(threshold=threshold))
    combinations = palette.combinations[:limit] if limit else palette.combinations

    if as_json:
        click.echo(json.dumps([c.to_dict() for c in combinations], indent=2))
        return

    if not combinations:
        click.echo(f"No combinations with contrast >= {threshold:.2f}")
        return
    for combo in combinations:
        click.echo(
            f"{combo.foreground} on {combo.background}  "
            f"{combo.contrast:5.2f}  {combo.rating}"
        )


@cli.command()
@click.argument("stylesheet")
@threshold_option
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default="color-report.html",
    show_default=True,
    help="Where to write the HTML report",
)
@click.option("--title", default="Color report", show_default=True, help="Report title")
def report(stylesheet: str, threshold: float, output: str, title: str) -> None:
    """Write an HTML color report for STYLESHEET."""
    from csspalette.report import write_report

    config = PaletteConfig(threshold=threshold, title=title)
    palette = _analyze(stylesheet, config)
    path = write_report(palette, output, title=config.title, source=stylesheet)
    click.echo(
        f"Wrote {path} ({len(palette.colors)} colors, "
        f"{len(palette.combinations)} combinations)"
    )
