"""End-to-end tests for the analysis pipeline."""

from pathlib import Path

import pytest

from csspalette.config import PaletteConfig
from csspalette.pipeline import Palette, analyze, analyze_stylesheet
from csspalette.stylesheet import Declaration, parse_declarations

FIXTURES = Path(__file__).parent.parent / "fixtures"

SITE_COLORS = ("#222222", "#ffffff", "#800080", "#0066cc", "#eeeeee")


@pytest.fixture()
def site_css() -> str:
    return (FIXTURES / "site.css").read_text()


class TestAnalyze:
    def test_colors_from_declarations(self):
        decls = [
            Declaration("color", "red", 0),
            Declaration("border-color", "blue", 1),
            Declaration("background-color", "#fff", 2),
        ]
        palette = analyze(decls)
        assert palette.colors == ("#ff0000", "#ffffff")
        assert len(palette.combinations) == 4

    def test_threshold_recorded(self):
        palette = analyze([], threshold=4.5)
        assert palette.threshold == 4.5
        assert palette.colors == ()
        assert palette.combinations == ()

    def test_bad_values_never_abort(self):
        decls = [
            Declaration("color", "rgb(1, 2)", 0),
            Declaration("color", "var(--x)", 1),
            Declaration("color", "black", 2),
        ]
        palette = analyze(decls)
        assert palette.colors == ("#000000",)
        assert palette.skipped == ("rgb(1, 2)", "var(--x)")

    def test_logs_summary(self, caplog):
        import logging

        with caplog.at_level(logging.INFO, logger="csspalette.pipeline"):
            analyze([Declaration("color", "red", 0)])
        assert "1 distinct color(s)" in caplog.text


class TestAnalyzeStylesheet:
    def test_site_colors(self, site_css):
        palette = analyze_stylesheet(site_css)
        assert palette.colors == SITE_COLORS

    def test_site_skipped(self, site_css):
        palette = analyze_stylesheet(site_css)
        assert palette.skipped == ("inherit", "transparent", "var(--accent)", "rgb(1, 2)")

    def test_site_threshold(self, site_css):
        palette = analyze_stylesheet(site_css, PaletteConfig(threshold=7))
        assert palette.combinations
        assert all(c.contrast >= 7 for c in palette.combinations)
        assert palette.combinations[0].foreground == "#222222"
        assert palette.combinations[0].background == "#ffffff"

    def test_config_properties(self):
        palette = analyze_stylesheet(
            "a { border-color: red; color: blue; }",
            PaletteConfig(properties=("border-color",)),
        )
        assert palette.colors == ("#ff0000",)

    def test_nested_rule_colors_all_kept(self):
        palette = analyze_stylesheet(
            ".a { color: red; .b { color: blue } background-color: green }"
        )
        assert palette.colors == ("#ff0000", "#0000ff", "#008000")

    def test_idempotent(self, site_css):
        first = analyze_stylesheet(site_css, PaletteConfig(threshold=3))
        second = analyze_stylesheet(site_css, PaletteConfig(threshold=3))
        assert first == second
        assert [c.contrast for c in first.combinations] == [
            c.contrast for c in second.combinations
        ]

    def test_matches_manual_pipeline(self, site_css):
        assert analyze_stylesheet(site_css) == analyze(parse_declarations(site_css))


class TestPalette:
    def test_to_dict(self):
        palette = analyze([Declaration("color", "#000", 0), Declaration("color", "#fff", 1)], threshold=21)
        data = palette.to_dict()
        assert data["colors"] == ["#000000", "#ffffff"]
        assert data["threshold"] == 21
        assert data["skipped"] == []

    def test_frozen(self):
        palette = Palette(colors=(), combinations=())
        with pytest.raises(AttributeError):
            palette.colors = ("#000000",)  # type: ignore[misc]
