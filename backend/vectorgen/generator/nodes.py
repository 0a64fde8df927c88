"""IR vector nodes -> ImageVector builder DSL lines."""

from __future__ import annotations

from typing import assert_never

from vectorgen.generator.formatting import (
    call,
    format_bool,
    format_color,
    format_float,
    indent,
    kotlin_string,
)
from vectorgen.ir import (
    IrColor,
    IrFill,
    IrGroup,
    IrLinearGradient,
    IrPath,
    IrPathFillType,
    IrRadialGradient,
    IrStrokeLineCap,
    IrStrokeLineJoin,
    IrVectorNode,
)
from vectorgen.ir.path_node import (
    ArcTo,
    Close,
    CurveTo,
    HorizontalTo,
    IrPathNode,
    LineTo,
    MoveTo,
    QuadTo,
    ReflectiveCurveTo,
    ReflectiveQuadTo,
    RelativeArcTo,
    RelativeCurveTo,
    RelativeHorizontalTo,
    RelativeLineTo,
    RelativeMoveTo,
    RelativeQuadTo,
    RelativeReflectiveCurveTo,
    RelativeReflectiveQuadTo,
    RelativeVerticalTo,
    VerticalTo,
)

IMPORT_BRUSH = "androidx.compose.ui.graphics.Brush"
IMPORT_COLOR = "androidx.compose.ui.graphics.Color"
IMPORT_OFFSET = "androidx.compose.ui.geometry.Offset"
IMPORT_PATH = "androidx.compose.ui.graphics.vector.path"
IMPORT_GROUP = "androidx.compose.ui.graphics.vector.group"
IMPORT_PATH_FILL_TYPE = "androidx.compose.ui.graphics.PathFillType"
IMPORT_SOLID_COLOR = "androidx.compose.ui.graphics.SolidColor"
IMPORT_STROKE_CAP = "androidx.compose.ui.graphics.StrokeCap"
IMPORT_STROKE_JOIN = "androidx.compose.ui.graphics.StrokeJoin"


def _args(*values: float) -> str:
    return ", ".join(format_float(v) for v in values)


def emit_path_node(node: IrPathNode) -> str:
    match node:
        case Close():
            return "close()"
        case MoveTo(x, y):
            return f"moveTo({_args(x, y)})"
        case RelativeMoveTo(x, y):
            return f"moveToRelative({_args(x, y)})"
        case LineTo(x, y):
            return f"lineTo({_args(x, y)})"
        case RelativeLineTo(x, y):
            return f"lineToRelative({_args(x, y)})"
        case HorizontalTo(x):
            return f"horizontalLineTo({_args(x)})"
        case RelativeHorizontalTo(x):
            return f"horizontalLineToRelative({_args(x)})"
        case VerticalTo(y):
            return f"verticalLineTo({_args(y)})"
        case RelativeVerticalTo(y):
            return f"verticalLineToRelative({_args(y)})"
        case CurveTo(x1, y1, x2, y2, x3, y3):
            return f"curveTo({_args(x1, y1, x2, y2, x3, y3)})"
        case RelativeCurveTo(dx1, dy1, dx2, dy2, dx3, dy3):
            return f"curveToRelative({_args(dx1, dy1, dx2, dy2, dx3, dy3)})"
        case ReflectiveCurveTo(x1, y1, x2, y2):
            return f"reflectiveCurveTo({_args(x1, y1, x2, y2)})"
        case RelativeReflectiveCurveTo(x1, y1, x2, y2):
            return f"reflectiveCurveToRelative({_args(x1, y1, x2, y2)})"
        case QuadTo(x1, y1, x2, y2):
            return f"quadTo({_args(x1, y1, x2, y2)})"
        case RelativeQuadTo(x1, y1, x2, y2):
            return f"quadToRelative({_args(x1, y1, x2, y2)})"
        case ReflectiveQuadTo(x, y):
            return f"reflectiveQuadTo({_args(x, y)})"
        case RelativeReflectiveQuadTo(x, y):
            return f"reflectiveQuadToRelative({_args(x, y)})"
        case ArcTo() | RelativeArcTo():
            name = "arcTo" if isinstance(node, ArcTo) else "arcToRelative"
            return (
                f"{name}("
                f"{_args(node.horizontal_ellipse_radius, node.vertical_ellipse_radius, node.theta)}, "
                f"{format_bool(node.is_more_than_half)}, {format_bool(node.is_positive_arc)}, "
                f"{_args(node.x, node.y)})"
            )
        case _:
            assert_never(node)


def _color_stops(stops, trailing_comma: bool) -> list[str]:
    return call(
        "colorStops = arrayOf",
        [[f"{format_float(stop.offset)} to {format_color(IrColor(stop.color).argb)}"] for stop in stops],
        trailing_comma,
    )


def emit_brush(name: str, paint: IrFill, imports: set[str], trailing_comma: bool) -> list[str]:
    """``name = <Brush>`` argument lines for a fill or stroke paint."""
    imports.add(IMPORT_COLOR)
    match paint:
        case IrColor():
            imports.add(IMPORT_SOLID_COLOR)
            return [f"{name} = SolidColor({format_color(paint.argb)})"]
        case IrLinearGradient():
            imports.update((IMPORT_BRUSH, IMPORT_OFFSET))
            return call(
                f"{name} = Brush.linearGradient",
                [
                    _color_stops(paint.color_stops, trailing_comma),
                    [f"start = Offset({_args(paint.start_x, paint.start_y)})"],
                    [f"end = Offset({_args(paint.end_x, paint.end_y)})"],
                ],
                trailing_comma,
            )
        case IrRadialGradient():
            imports.update((IMPORT_BRUSH, IMPORT_OFFSET))
            return call(
                f"{name} = Brush.radialGradient",
                [
                    _color_stops(paint.color_stops, trailing_comma),
                    [f"center = Offset({_args(paint.center_x, paint.center_y)})"],
                    [f"radius = {format_float(paint.radius)}"],
                ],
                trailing_comma,
            )
        case _:
            assert_never(paint)


def _path_params(path: IrPath, imports: set[str], trailing_comma: bool) -> list[list[str]]:
    """Non-default ``path(...)`` arguments in builder parameter order."""
    params: list[list[str]] = []
    if path.name:
        params.append([f"name = {kotlin_string(path.name)}"])
    if path.fill is not None:
        params.append(emit_brush("fill", path.fill, imports, trailing_comma))
    if path.fill_alpha != 1.0:
        params.append([f"fillAlpha = {format_float(path.fill_alpha)}"])
    if path.stroke is not None:
        params.append(emit_brush("stroke", path.stroke, imports, trailing_comma))
    if path.stroke_alpha != 1.0:
        params.append([f"strokeAlpha = {format_float(path.stroke_alpha)}"])
    if path.stroke_line_width != 0.0:
        params.append([f"strokeLineWidth = {format_float(path.stroke_line_width)}"])
    if path.stroke_line_cap != IrStrokeLineCap.Butt:
        imports.add(IMPORT_STROKE_CAP)
        params.append([f"strokeLineCap = StrokeCap.{path.stroke_line_cap.value}"])
    if path.stroke_line_join != IrStrokeLineJoin.Miter:
        imports.add(IMPORT_STROKE_JOIN)
        params.append([f"strokeLineJoin = StrokeJoin.{path.stroke_line_join.value}"])
    if path.stroke_line_miter != 4.0:
        params.append([f"strokeLineMiter = {format_float(path.stroke_line_miter)}"])
    if path.path_fill_type != IrPathFillType.NonZero:
        imports.add(IMPORT_PATH_FILL_TYPE)
        params.append([f"pathFillType = PathFillType.{path.path_fill_type.value}"])
    return params


def emit_path(path: IrPath, imports: set[str], trailing_comma: bool) -> list[str]:
    imports.add(IMPORT_PATH)
    params = _path_params(path, imports, trailing_comma)
    head = call("path", params, trailing_comma, close=") {") if params else ["path {"]
    return head + indent([emit_path_node(node) for node in path.nodes]) + ["}"]


def emit_vector_node(node: IrVectorNode, imports: set[str], trailing_comma: bool) -> list[str]:
    match node:
        case IrGroup():
            imports.add(IMPORT_GROUP)
            body = [line for path in node.nodes for line in emit_path(path, imports, trailing_comma)]
            return ["group {"] + indent(body) + ["}"]
        case IrPath():
            return emit_path(node, imports, trailing_comma)
        case _:
            assert_never(node)
