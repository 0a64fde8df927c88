"""Attribute value helpers shared by both dialects: colors, lengths, enums."""

from __future__ import annotations

import math
import re

import webcolors

from vectorgen.ir import IrPathFillType, IrStrokeLineCap, IrStrokeLineJoin

_HEX_RE = re.compile(r"^#([0-9A-Fa-f]{3,8})$")
_RGB_RE = re.compile(r"^rgba?\(\s*([^)]*)\)$", re.IGNORECASE)
_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*([a-z%]*)\s*$", re.IGNORECASE)

# CSS absolute units at 96 dpi.
_UNIT_SCALE = {
    "": 1.0,
    "px": 1.0,
    "dp": 1.0,
    "dip": 1.0,
    "pt": 96.0 / 72.0,
    "pc": 16.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
}

# Keywords outside the CSS3 named color table.
_SPECIAL_COLORS = {
    "transparent": "#00000000",
    "currentcolor": "#000000",
}


def named_color(name: str) -> str | None:
    """``#RRGGBB`` for an SVG color keyword, or None when unknown."""
    key = name.strip().lower()
    if key in _SPECIAL_COLORS:
        return _SPECIAL_COLORS[key]
    try:
        return webcolors.name_to_hex(key).upper()
    except ValueError:
        return None


def parse_length(value: str | None) -> float | None:
    """Length in output units, or None when missing, relative (%, em) or unparseable."""
    if value is None:
        return None
    match = _LENGTH_RE.match(value)
    if not match:
        return None
    unit = match.group(2).lower()
    if unit not in _UNIT_SCALE:
        return None
    length = float(match.group(1)) * _UNIT_SCALE[unit]
    return length if math.isfinite(length) else None


def parse_float(value: str | None, default: float) -> float:
    """Finite number, or ``default`` for missing, unparseable, nan and inf."""
    if value is None or not value.strip():
        return default
    try:
        number = float(value.strip())
    except ValueError:
        return default
    return number if math.isfinite(number) else default


def parse_fraction(value: str | None, default: float) -> float:
    """Number or percentage, percentages divided by 100."""
    if value is None or not value.strip():
        return default
    text = value.strip()
    try:
        number = float(text[:-1]) / 100.0 if text.endswith("%") else float(text)
    except ValueError:
        return default
    return number if math.isfinite(number) else default


def clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


def _hex2(value: float) -> str:
    return f"{max(0, min(255, round(value))):02X}"


def normalize_color(value: str, *, css_alpha_last: bool = True) -> str | None:
    """Normalize a literal color to ``#RRGGBB`` / ``#AARRGGBB``.

    Eight-digit hex is ``RRGGBBAA`` in SVG/CSS and ``AARRGGBB`` in vector
    drawables; ``css_alpha_last`` selects the interpretation (likewise for
    four-digit shorthand). Returns None for anything that is not a literal
    color (``none``, references).
    """
    text = value.strip()
    named = named_color(text)
    if named is not None:
        return named

    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1).upper()
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            return f"#{digits}"
        if len(digits) == 8:
            if css_alpha_last:
                digits = digits[6:] + digits[:6]
            return f"#{digits}" if digits[:2] != "FF" else f"#{digits[2:]}"
        return None

    match = _RGB_RE.match(text)
    if match:
        parts = [p.strip() for p in re.split(r"[,\s/]+", match.group(1).strip()) if p.strip()]
        if len(parts) not in (3, 4):
            return None
        try:
            channels = [
                float(p[:-1]) * 2.55 if p.endswith("%") else float(p)
                for p in parts[:3]
            ]
            alpha = parse_fraction(parts[3], 1.0) if len(parts) == 4 else 1.0
        except ValueError:
            return None
        if not all(math.isfinite(c) for c in channels):
            return None
        rgb ="".join(_hex2(c) for c in channels)
        if alpha >= 1.0:
            return f"#{rgb}"
        return f"#{_hex2(clamp_unit(alpha) * 255)}{rgb}"

    return None


def with_alpha(color_hex: str, alpha: float) -> str:
    """Fold an extra opacity factor into a normalized color."""
    if alpha >= 1.0:
        return color_hex
    digits = color_hex[1:]
    base = int(digits[:2], 16) / 255.0 if len(digits) == 8 else 1.0
    rgb = digits[-6:]
    return f"#{_hex2(base * clamp_unit(alpha) * 255)}{rgb}"


_FILL_TYPES = {
    "nonzero": IrPathFillType.NonZero,
    "evenodd": IrPathFillType.EvenOdd,
}

_LINE_CAPS = {
    "butt": IrStrokeLineCap.Butt,
    "round": IrStrokeLineCap.Round,
    "square": IrStrokeLineCap.Square,
}

_LINE_JOINS = {
    "miter": IrStrokeLineJoin.Miter,
    "round": IrStrokeLineJoin.Round,
    "bevel": IrStrokeLineJoin.Bevel,
}


def parse_fill_type(value: str | None) -> IrPathFillType:
    if value is None:
        return IrPathFillType.NonZero
    return _FILL_TYPES.get(value.strip().lower(), IrPathFillType.NonZero)


def parse_line_cap(value: str | None) -> IrStrokeLineCap:
    if value is None:
        return IrStrokeLineCap.Butt
    return _LINE_CAPS.get(value.strip().lower(), IrStrokeLineCap.Butt)


def parse_line_join(value: str | None) -> IrStrokeLineJoin:
    if value is None:
        return IrStrokeLineJoin.Miter
    return _LINE_JOINS.get(value.strip().lower(), IrStrokeLineJoin.Miter)


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on tags and attributes."""
    return tag.split("}")[-1] if "}" in tag else tag
