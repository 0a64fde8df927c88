"""Path commands of the vector icon IR.

Each command is absolute or relative, mirroring the SVG / vector-drawable path
minilanguage one-to-one. Relative commands are interpreted against the cursor
left by the previous command.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Close:
    pass


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class RelativeMoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class RelativeLineTo:
    x: float
    y: float


@dataclass(frozen=True)
class HorizontalTo:
    x: float


@dataclass(frozen=True)
class RelativeHorizontalTo:
    x: float


@dataclass(frozen=True)
class VerticalTo:
    y: float


@dataclass(frozen=True)
class RelativeVerticalTo:
    y: float


@dataclass(frozen=True)
class CurveTo:
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float


@dataclass(frozen=True)
class RelativeCurveTo:
    dx1: float
    dy1: float
    dx2: float
    dy2: float
    dx3: float
    dy3: float


@dataclass(frozen=True)
class ReflectiveCurveTo:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class RelativeReflectiveCurveTo:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class QuadTo:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class RelativeQuadTo:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class ReflectiveQuadTo:
    x: float
    y: float


@dataclass(frozen=True)
class RelativeReflectiveQuadTo:
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo:
    horizontal_ellipse_radius: float
    vertical_ellipse_radius: float
    theta: float
    is_more_than_half: bool
    is_positive_arc: bool
    x: float
    y: float


@dataclass(frozen=True)
class RelativeArcTo:
    horizontal_ellipse_radius: float
    vertical_ellipse_radius: float
    theta: float
    is_more_than_half: bool
    is_positive_arc: bool
    x: float
    y: float


IrPathNode: TypeAlias = (
    Close
    | MoveTo
    | RelativeMoveTo
    | LineTo
    | RelativeLineTo
    | HorizontalTo
    | RelativeHorizontalTo
    | VerticalTo
    | RelativeVerticalTo
    | CurveTo
    | RelativeCurveTo
    | ReflectiveCurveTo
    | RelativeReflectiveCurveTo
    | QuadTo
    | RelativeQuadTo
    | ReflectiveQuadTo
    | RelativeReflectiveQuadTo
    | ArcTo
    | RelativeArcTo
)
