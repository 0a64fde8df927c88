"""Tests for Kotlin formatting primitives."""

from __future__ import annotations

import pytest

from vectorgen.generator.formatting import call, format_dp, format_float, format_number, kotlin_string


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (24.0, "24"),
        (0.5, "0.5"),
        (-1.25, "-1.25"),
        (12.127, "12.127"),
        (1 / 3, "0.33333"),
        (-0.000001, "0"),
        (1e-7, "0"),
        (1234567.0, "1234567"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_kotlin_literals():
    assert format_float(2) == "2f"
    assert format_dp(24) == "24.dp"
    assert kotlin_string('a"b$c') == '"a\\"b\\$c"'


def test_call_trailing_comma():
    assert call("f", [["a = 1"], ["b = 2"]], trailing_comma=False) == ["f(", "    a = 1,", "    b = 2", ")"]
    assert call("f", [["a = 1"]], trailing_comma=True) == ["f(", "    a = 1,", ")"]


def test_call_without_args():
    assert call("f", [], trailing_comma=True) == ["f()"]
