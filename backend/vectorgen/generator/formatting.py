"""Kotlin source formatting primitives.

Code is assembled as lists of lines; nested call sites indent their
arguments by one level relative to the call head.
"""

from __future__ import annotations

from collections.abc import Sequence

INDENT = "    "

# Fixed precision keeps output byte-stable across platforms and locales.
DECIMAL_PLACES = 5


def format_number(value: float) -> str:
    """Shortest decimal rendering of ``value`` at fixed precision, no suffix."""
    text = f"{value:.{DECIMAL_PLACES}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_float(value: float) -> str:
    """Kotlin Float literal: ``24f``, ``0.5f``, ``-1.25f``."""
    return f"{format_number(value)}f"


def format_dp(value: float) -> str:
    return f"{format_number(value)}.dp"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_color(argb: str) -> str:
    return f"Color(0x{argb})"


def kotlin_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
    return f'"{escaped}"'


def indent(lines: Sequence[str], level: int = 1) -> list[str]:
    prefix = INDENT * level
    return [prefix + line if line else line for line in lines]


def call(
    head: str,
    args: Sequence[Sequence[str]],
    trailing_comma: bool,
    close: str = ")",
) -> list[str]:
    """Multi-line call site, one argument per line.

    Each argument is itself a list of lines so arguments can nest calls.
    The comma after the last argument depends on ``trailing_comma``.
    """
    if not args:
        return [f"{head}(" + close]
    lines = [f"{head}("]
    for i, arg in enumerate(args):
        arg_lines = list(arg)
        if i < len(args) - 1 or trailing_comma:
            arg_lines[-1] += ","
        lines.extend(indent(arg_lines))
    lines.append(close)
    return lines
