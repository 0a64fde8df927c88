"""Gradient color stop assembly shared by both dialects."""

from __future__ import annotations

from collections.abc import Iterable

from vectorgen.ir import IrColor, IrColorStop, IrFill, IrLinearGradient, IrRadialGradient
from vectorgen.parser.attributes import clamp_unit


def build_color_stops(raw_stops: Iterable[tuple[float, str]]) -> tuple[IrColorStop, ...]:
    """Color stops in document order with offsets clamped to [0, 1].

    Each offset is also raised to the largest offset seen so far, so the
    sequence is non-decreasing without reordering the stops.
    """
    stops: list[IrColorStop] = []
    running = 0.0
    for offset, color in raw_stops:
        running = max(running, clamp_unit(offset))
        stops.append(IrColorStop(offset=running, color=color))
    return tuple(stops)


def first_stop_color(fill: IrFill, default: str = "#000000") -> str:
    """Flat color standing in for a gradient where only flat colors are allowed."""
    if isinstance(fill, IrColor):
        return fill.color_hex
    if isinstance(fill, (IrLinearGradient, IrRadialGradient)) and fill.color_stops:
        return fill.color_stops[0].color
    return default
