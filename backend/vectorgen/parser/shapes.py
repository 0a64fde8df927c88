"""Convert SVG basic shapes to equivalent path data."""

from __future__ import annotations

import re
from collections.abc import Mapping

from vectorgen.parser.attributes import parse_length

_POINTS_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

SHAPE_TAGS = {"rect", "circle", "ellipse", "line", "polyline", "polygon"}


def _n(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _length(attrs: Mapping[str, str], name: str, default: float = 0.0) -> float:
    value = parse_length(attrs.get(name))
    return default if value is None else value


def rect_to_path(attrs: Mapping[str, str]) -> str | None:
    x = _length(attrs, "x")
    y = _length(attrs, "y")
    w = _length(attrs, "width")
    h = _length(attrs, "height")
    if w <= 0 or h <= 0:
        return None

    rx = parse_length(attrs.get("rx"))
    ry = parse_length(attrs.get("ry"))
    if rx is None:
        rx = ry
    if ry is None:
        ry = rx
    rx = min(max(rx or 0.0, 0.0), w / 2)
    ry = min(max(ry or 0.0, 0.0), h / 2)

    if rx == 0 or ry == 0:
        return f"M{_n(x)},{_n(y)} H{_n(x + w)} V{_n(y + h)} H{_n(x)} Z"

    arc = f"A{_n(rx)},{_n(ry)} 0 0 1"
    return (
        f"M{_n(x + rx)},{_n(y)} H{_n(x + w - rx)} {arc} {_n(x + w)},{_n(y + ry)} "
        f"V{_n(y + h - ry)} {arc} {_n(x + w - rx)},{_n(y + h)} "
        f"H{_n(x + rx)} {arc} {_n(x)},{_n(y + h - ry)} "
        f"V{_n(y + ry)} {arc} {_n(x + rx)},{_n(y)} Z"
    )


def ellipse_to_path(cx: float, cy: float, rx: float, ry: float) -> str | None:
    if rx <= 0 or ry <= 0:
        return None
    arc = f"A{_n(rx)},{_n(ry)} 0 1 0"
    return (
        f"M{_n(cx - rx)},{_n(cy)} {arc} {_n(cx + rx)},{_n(cy)} "
        f"{arc} {_n(cx - rx)},{_n(cy)} Z"
    )


def points_to_path(points: str | None, closed: bool) -> str | None:
    values = [float(v) for v in _POINTS_RE.findall(points or "")]
    pairs = list(zip(values[0::2], values[1::2]))
    if len(pairs) < 2:
        return None
    head, *rest = pairs
    data = f"M{_n(head[0])},{_n(head[1])} " + " ".join(f"L{_n(px)},{_n(py)}" for px, py in rest)
    return data + " Z" if closed else data


def shape_to_path(tag: str, attrs: Mapping[str, str]) -> str | None:
    """Path data for a basic shape element, or None if it draws nothing."""
    if tag == "rect":
        return rect_to_path(attrs)
    if tag == "circle":
        r = _length(attrs, "r")
        return ellipse_to_path(_length(attrs, "cx"), _length(attrs, "cy"), r, r)
    if tag == "ellipse":
        return ellipse_to_path(
            _length(attrs, "cx"), _length(attrs, "cy"), _length(attrs, "rx"), _length(attrs, "ry")
        )
    if tag == "line":
        return (
            f"M{_n(_length(attrs, 'x1'))},{_n(_length(attrs, 'y1'))} "
            f"L{_n(_length(attrs, 'x2'))},{_n(_length(attrs, 'y2'))}"
        )
    if tag == "polyline":
        return points_to_path(attrs.get("points"), closed=False)
    if tag == "polygon":
        return points_to_path(attrs.get("points"), closed=True)
    return None
