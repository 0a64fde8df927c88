"""Canonical, dialect-independent model of a vector icon.

The model is pure data. It is built once per source document by the document
parser and may be consumed any number of times by the code generator.
"""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass, field
from typing import TypeAlias

from vectorgen.ir.path_node import IrPathNode

_COLOR_HEX_RE = re.compile(r"^#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


class IrPathFillType(enum.Enum):
    EvenOdd = "EvenOdd"
    NonZero = "NonZero"


class IrStrokeLineCap(enum.Enum):
    Butt = "Butt"
    Round = "Round"
    Square = "Square"


class IrStrokeLineJoin(enum.Enum):
    Miter = "Miter"
    Round = "Round"
    Bevel = "Bevel"


@dataclass(frozen=True)
class IrColor:
    """Flat color, ``#RRGGBB`` or ``#AARRGGBB``."""

    color_hex: str

    def __post_init__(self) -> None:
        if not _COLOR_HEX_RE.match(self.color_hex):
            raise ValueError(f"Invalid color hex: {self.color_hex!r}")

    @property
    def argb(self) -> str:
        """Eight uppercase hex digits, alpha first."""
        digits = self.color_hex[1:].upper()
        return digits if len(digits) == 8 else "FF" + digits


@dataclass(frozen=True)
class IrColorStop:
    offset: float
    color: str

    def __post_init__(self) -> None:
        if not 0.0 <= self.offset <= 1.0:
            raise ValueError(f"Color stop offset out of range: {self.offset}")
        IrColor(self.color)


def _check_stop_order(stops: tuple[IrColorStop, ...]) -> None:
    for prev, cur in zip(stops, stops[1:]):
        if cur.offset < prev.offset:
            raise ValueError("Color stop offsets must be non-decreasing")


@dataclass(frozen=True)
class IrLinearGradient:
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    color_stops: tuple[IrColorStop, ...] = ()

    def __post_init__(self) -> None:
        _check_stop_order(self.color_stops)


@dataclass(frozen=True)
class IrRadialGradient:
    center_x: float
    center_y: float
    radius: float
    color_stops: tuple[IrColorStop, ...] = ()

    def __post_init__(self) -> None:
        _check_stop_order(self.color_stops)


IrFill: TypeAlias = IrColor | IrLinearGradient | IrRadialGradient
# Strokes are flat colors only.
IrStroke: TypeAlias = IrColor


@dataclass(frozen=True)
class IrPath:
    name: str = ""
    fill: IrFill | None = None
    fill_alpha: float = 1.0
    stroke: IrStroke | None = None
    stroke_alpha: float = 1.0
    stroke_line_width: float = 0.0
    stroke_line_cap: IrStrokeLineCap = IrStrokeLineCap.Butt
    stroke_line_join: IrStrokeLineJoin = IrStrokeLineJoin.Miter
    stroke_line_miter: float = 4.0
    path_fill_type: IrPathFillType = IrPathFillType.NonZero
    nodes: tuple[IrPathNode, ...] = ()

    def __post_init__(self) -> None:
        if not 0.0 <= self.fill_alpha <= 1.0:
            raise ValueError(f"fill_alpha out of range: {self.fill_alpha}")
        if not 0.0 <= self.stroke_alpha <= 1.0:
            raise ValueError(f"stroke_alpha out of range: {self.stroke_alpha}")
        if not 0.0 <= self.stroke_line_width < math.inf:
            raise ValueError(f"Invalid stroke width: {self.stroke_line_width}")
        if not math.isfinite(self.stroke_line_miter):
            raise ValueError(f"Invalid stroke miter: {self.stroke_line_miter}")


@dataclass(frozen=True)
class IrGroup:
    """One level of grouping: groups hold paths only."""

    nodes: tuple[IrPath, ...] = ()


IrVectorNode: TypeAlias = IrGroup | IrPath


@dataclass(frozen=True)
class IrImageVector:
    default_width: float
    default_height: float
    viewport_width: float
    viewport_height: float
    vector_nodes: tuple[IrVectorNode, ...] = field(default_factory=tuple)
    name: str = ""
    auto_mirror: bool = False

    def __post_init__(self) -> None:
        # Chained comparisons reject nan and inf.
        if not (0 < self.viewport_width < math.inf and 0 < self.viewport_height < math.inf):
            raise ValueError(
                f"Viewport must be positive, got {self.viewport_width}x{self.viewport_height}"
            )
        if not (0 < self.default_width < math.inf and 0 < self.default_height < math.inf):
            raise ValueError(
                f"Default size must be positive, got {self.default_width}x{self.default_height}"
            )

    def iter_paths(self):
        """All paths in document order, descending into groups."""
        for node in self.vector_nodes:
            if isinstance(node, IrGroup):
                yield from node.nodes
            else:
                yield node
