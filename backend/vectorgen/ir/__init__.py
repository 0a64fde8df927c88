"""Intermediate representation of a scalable vector icon."""

from vectorgen.ir.image_vector import (
    IrColor,
    IrColorStop,
    IrFill,
    IrGroup,
    IrImageVector,
    IrLinearGradient,
    IrPath,
    IrPathFillType,
    IrRadialGradient,
    IrStroke,
    IrStrokeLineCap,
    IrStrokeLineJoin,
    IrVectorNode,
)
from vectorgen.ir.path_node import IrPathNode

__all__ = [
    "IrColor",
    "IrColorStop",
    "IrFill",
    "IrGroup",
    "IrImageVector",
    "IrLinearGradient",
    "IrPath",
    "IrPathFillType",
    "IrPathNode",
    "IrRadialGradient",
    "IrStroke",
    "IrStrokeLineCap",
    "IrStrokeLineJoin",
    "IrVectorNode",
]
