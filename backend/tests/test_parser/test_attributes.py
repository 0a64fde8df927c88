"""Tests for attribute value helpers."""

from __future__ import annotations

import pytest

from vectorgen.ir import IrPathFillType, IrStrokeLineCap, IrStrokeLineJoin
from vectorgen.parser.attributes import (
    named_color,
    normalize_color,
    parse_fill_type,
    parse_float,
    parse_fraction,
    parse_length,
    parse_line_cap,
    parse_line_join,
    with_alpha,
)


class TestColors:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("#abc", "#AABBCC"),
            ("#1E88E5", "#1E88E5"),
            ("#1E88E580", "#801E88E5"),
            ("#1E88E5FF", "#1E88E5"),
            ("rgb(255, 0, 0)", "#FF0000"),
            ("rgba(0, 0, 255, 0.5)", "#800000FF"),
            ("rgb(100%, 0%, 0%)", "#FF0000"),
            ("Red", "#FF0000"),
            ("currentColor", "#000000"),
            ("transparent", "#00000000"),
            ("gold", "#FFD700"),
            ("DarkRed", "#8B0000"),
            ("pink", "#FFC0CB"),
        ],
    )
    def test_css_colors(self, value, expected):
        assert normalize_color(value) == expected

    def test_android_alpha_first(self):
        assert normalize_color("#801E88E5", css_alpha_last=False) == "#801E88E5"
        assert normalize_color("#8abc", css_alpha_last=False) == "#88AABBCC"

    @pytest.mark.parametrize("value", ["none", "url(#g)", "#12", "rgb(1,2)", "bogus"])
    def test_non_colors(self, value):
        assert normalize_color(value) is None

    def test_full_keyword_table(self):
        assert named_color("lightgoldenrodyellow") == "#FAFAD2"
        assert named_color("notacolor") is None

    @pytest.mark.parametrize("value", ["rgb(nan, 0, 0)", "rgb(1e999, 0, 0)"])
    def test_non_finite_channels(self, value):
        assert normalize_color(value) is None

    def test_with_alpha(self):
        assert with_alpha("#1E88E5", 1.0) == "#1E88E5"
        assert with_alpha("#1E88E5", 0.5) == "#801E88E5"
        assert with_alpha("#801E88E5", 0.5) == "#401E88E5"


class TestNumbers:
    def test_lengths(self):
        assert parse_length("24") == 24
        assert parse_length("24px") == 24
        assert parse_length("24dp") == 24
        assert parse_length("1in") == 96
        assert parse_length("10mm") == pytest.approx(37.795, rel=1e-4)
        assert parse_length("50%") is None
        assert parse_length("2em") is None
        assert parse_length(None) is None

    def test_fractions(self):
        assert parse_fraction("50%", 0.0) == 0.5
        assert parse_fraction("0.25", 0.0) == 0.25
        assert parse_fraction("x", 0.3) == 0.3

    @pytest.mark.parametrize("value", ["nan", "inf", "-Infinity", "1e999"])
    def test_non_finite_numbers_fall_back(self, value):
        assert parse_float(value, 4.0) == 4.0
        assert parse_fraction(value, 0.5) == 0.5

    def test_overflowing_length(self):
        assert parse_length("1e999px") is None


class TestEnums:
    def test_fill_type(self):
        assert parse_fill_type(None) == IrPathFillType.NonZero
        assert parse_fill_type("evenOdd") == IrPathFillType.EvenOdd

    def test_line_cap_and_join(self):
        assert parse_line_cap("SQUARE") == IrStrokeLineCap.Square
        assert parse_line_cap("weird") == IrStrokeLineCap.Butt
        assert parse_line_join("bevel") == IrStrokeLineJoin.Bevel
        assert parse_line_join(None) == IrStrokeLineJoin.Miter
