"""Tests for declaration extraction and color set building."""

import pytest

from csspalette.colors import normalize
from csspalette.pipeline import (
    COLOR_PROPERTIES,
    build_color_set,
    extract_color_values,
    partition_values,
)
from csspalette.stylesheet import Declaration


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _decls(*pairs: tuple[str, str]) -> list[Declaration]:
    return [
        Declaration(property=prop, value=value, source_order=i)
        for i, (prop, value) in enumerate(pairs)
    ]


# ---------------------------------------------------------------------------
# extract_color_values
# ---------------------------------------------------------------------------


class TestExtract:
    def test_filters_to_color_properties(self):
        decls = _decls(("color", "red"), ("border-color", "blue"), ("background-color", "#fff"))
        assert extract_color_values(decls) == ["red", "#fff"]

    def test_property_match_is_case_insensitive(self):
        decls = _decls(("COLOR", "red"), ("Background-Color", "blue"))
        assert extract_color_values(decls) == ["red", "blue"]

    def test_exact_match_only(self):
        decls = _decls(
            ("background", "red"),
            ("outline-color", "red"),
            ("--color", "red"),
            ("colors", "red"),
        )
        assert extract_color_values(decls) == []

    def test_preserves_order(self):
        decls = _decls(("background-color", "a"), ("color", "b"), ("color", "c"))
        assert extract_color_values(decls) == ["a", "b", "c"]

    def test_does_not_mutate_input(self):
        decls = _decls(("color", "red"), ("margin", "0"))
        before = list(decls)
        extract_color_values(decls)
        assert decls == before

    def test_custom_properties(self):
        decls = _decls(("color", "red"), ("border-color", "blue"))
        assert extract_color_values(decls, {"border-color"}) == ["blue"]

    def test_default_properties(self):
        assert COLOR_PROPERTIES == {"color", "background-color"}

    def test_empty(self):
        assert extract_color_values([]) == []


# ---------------------------------------------------------------------------
# build_color_set
# ---------------------------------------------------------------------------


class TestBuildColorSet:
    def test_dedup_keeps_first_seen_order(self):
        values = ["red", "#00ff00", "red", "#0000FF", "#00ff00"]
        assert build_color_set(values) == ("#ff0000", "#00ff00", "#0000ff")

    def test_dedup_across_syntaxes(self):
        values = ["#fff", "white", "rgb(255, 255, 255)", "#FFFFFF"]
        assert build_color_set(values) == ("#ffffff",)

    def test_skips_non_colors(self):
        values = ["inherit", "red", "var(--x)", "rgb(1, 2)", "blue"]
        assert build_color_set(values) == ("#ff0000", "#0000ff")

    def test_empty(self):
        assert build_color_set([]) == ()

    def test_idempotent(self):
        values = ["navy", "#abc", "hsl(0, 100%, 50%)", "navy"]
        assert build_color_set(values) == build_color_set(values)

    def test_accepts_generator(self):
        assert build_color_set(v for v in ["red", "red"]) == ("#ff0000",)


class TestPartitionValues:
    def test_returns_skipped_in_order(self):
        colors, skipped = partition_values(["inherit", "red", "transparent", "red"])
        assert colors == ("#ff0000",)
        assert skipped == ("inherit", "transparent")

    @pytest.mark.parametrize(
        "values,expected_colors,expected_skipped",
        [
            ([], (), ()),
            (["red"], ("#ff0000",), ()),
            (["currentColor"], (), ("currentColor",)),
            (
                ["red", "inherit", "#f00", "currentColor", "rgb(1, 2)"],
                ("#ff0000",),
                ("inherit", "currentColor", "rgb(1, 2)"),
            ),
        ],
    )
    def test_every_value_lands_somewhere(
        self, values, expected_colors, expected_skipped
    ):
        colors, skipped = partition_values(values)
        assert colors == expected_colors
        assert skipped == expected_skipped
        kept = [v for v in values if v not in skipped]
        assert len(kept) + len(skipped) == len(values)
        assert {normalize(v) for v in kept} == set(colors)
