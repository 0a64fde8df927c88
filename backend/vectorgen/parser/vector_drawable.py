"""Android vector drawable dialect: ``<vector>`` element tree -> IrImageVector."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from vectorgen.errors import UnresolvedPaintReference, UnsupportedDocument
from vectorgen.ir import (
    IrColor,
    IrFill,
    IrGroup,
    IrImageVector,
    IrLinearGradient,
    IrPath,
    IrRadialGradient,
    IrVectorNode,
)
from vectorgen.parser.attributes import (
    clamp_unit,
    local_name,
    normalize_color,
    parse_fill_type,
    parse_float,
    parse_length,
    parse_line_cap,
    parse_line_join,
)
from vectorgen.parser.paint import build_color_stops, first_stop_color
from vectorgen.parser.path_data import parse_path_data
from vectorgen.parser.registry import IconType, dialect

logger = logging.getLogger(__name__)

ANDROID_NS = "http://schemas.android.com/apk/res/android"
AAPT_NS = "http://schemas.android.com/aapt"

_GROUP_TRANSFORMS = ("rotation", "pivotX", "pivotY", "scaleX", "scaleY", "translateX", "translateY")


def _attr(element: ET.Element, name: str) -> str | None:
    return element.get(f"{{{ANDROID_NS}}}{name}")


def _color(value: str) -> str:
    text = value.strip()
    if text.startswith(("@", "?")):
        raise UnresolvedPaintReference(text)
    color = normalize_color(text, css_alpha_last=False)
    if color is None:
        logger.warning("Unrecognized color %r, using black", text)
        return "#000000"
    return color


def _inline_gradients(element: ET.Element) -> dict[str, ET.Element]:
    """``<aapt:attr name="android:fillColor"><gradient/></aapt:attr>`` children keyed by attribute."""
    gradients: dict[str, ET.Element] = {}
    for child in element:
        if child.tag != f"{{{AAPT_NS}}}attr":
            continue
        name = (child.get("name") or "").split(":")[-1]
        for gradient in child:
            if isinstance(gradient.tag, str) and local_name(gradient.tag) == "gradient":
                gradients[name] = gradient
    return gradients


def _gradient(element: ET.Element) -> IrFill:
    items = [
        (parse_float(_attr(item, "offset"), 0.0), _color(_attr(item, "color") or "#000000"))
        for item in element
        if isinstance(item.tag, str) and local_name(item.tag) == "item"
    ]
    if not items:
        for name, offset in (("startColor", 0.0), ("centerColor", 0.5), ("endColor", 1.0)):
            value = _attr(element, name)
            if value is not None:
                items.append((offset, _color(value)))
    stops = build_color_stops(items)

    kind = (_attr(element, "type") or "linear").strip()
    if kind == "linear":
        return IrLinearGradient(
            start_x=parse_float(_attr(element, "startX"), 0.0),
            start_y=parse_float(_attr(element, "startY"), 0.0),
            end_x=parse_float(_attr(element, "endX"), 0.0),
            end_y=parse_float(_attr(element, "endY"), 0.0),
            color_stops=stops,
        )
    if kind == "radial":
        return IrRadialGradient(
            center_x=parse_float(_attr(element, "centerX"), 0.0),
            center_y=parse_float(_attr(element, "centerY"), 0.0),
            radius=parse_float(_attr(element, "gradientRadius"), 0.0),
            color_stops=stops,
        )
    logger.warning("Unsupported gradient type %r, using first stop color", kind)
    return IrColor(stops[0].color if stops else "#000000")


def _build_path(element: ET.Element) -> IrPath | None:
    data = _attr(element, "pathData")
    if not data:
        logger.debug("Skipping <path> without pathData")
        return None
    nodes = parse_path_data(data)
    if not nodes:
        return None

    gradients = _inline_gradients(element)
    fill: IrFill | None = None
    if "fillColor" in gradients:
        fill = _gradient(gradients["fillColor"])
    elif _attr(element, "fillColor") is not None:
        fill = IrColor(_color(_attr(element, "fillColor")))

    stroke: IrColor | None = None
    if "strokeColor" in gradients:
        logger.warning("Gradient strokes are not supported, using first stop color")
        stroke = IrColor(first_stop_color(_gradient(gradients["strokeColor"])))
    elif _attr(element, "strokeColor") is not None:
        stroke = IrColor(_color(_attr(element, "strokeColor")))

    return IrPath(
        name=_attr(element, "name") or "",
        fill=fill,
        fill_alpha=clamp_unit(parse_float(_attr(element, "fillAlpha"), 1.0)),
        stroke=stroke,
        stroke_alpha=clamp_unit(parse_float(_attr(element, "strokeAlpha"), 1.0)),
        stroke_line_width=max(0.0, parse_float(_attr(element, "strokeWidth"), 0.0)),
        stroke_line_cap=parse_line_cap(_attr(element, "strokeLineCap")),
        stroke_line_join=parse_line_join(_attr(element, "strokeLineJoin")),
        stroke_line_miter=parse_float(_attr(element, "strokeMiterLimit"), 4.0),
        path_fill_type=parse_fill_type(_attr(element, "fillType")),
        nodes=tuple(nodes),
    )


def _group_paths(group: ET.Element):
    """Paths of a group and its nested groups, flattened in document order."""
    stack = [group]
    while stack:
        element = stack.pop()
        if not isinstance(element.tag, str):
            continue
        tag = local_name(element.tag)
        if tag == "group":
            if any(_attr(element, name) is not None for name in _GROUP_TRANSFORMS):
                logger.warning("Ignoring transform on <group> %s", _attr(element, "name") or "")
            stack.extend(reversed(list(element)))
        elif tag == "path":
            path = _build_path(element)
            if path is not None:
                yield path
        elif tag != "clip-path":
            logger.debug("Skipping unsupported element <%s>", tag)


def _dimension(element: ET.Element, name: str) -> float | None:
    value = _attr(element, name)
    return None if value is None else parse_length(value)


@dialect(
    icon_type=IconType.XML,
    root_tag="vector",
    extensions={"xml"},
    description="Android vector drawable",
)
def parse_vector_root(root: ET.Element) -> IrImageVector:
    width = _dimension(root, "width")
    height = _dimension(root, "height")
    viewport_width = parse_float(_attr(root, "viewportWidth"), 0.0) or width
    viewport_height = parse_float(_attr(root, "viewportHeight"), 0.0) or height
    if viewport_width is None or viewport_height is None:
        raise UnsupportedDocument("Missing viewportWidth/viewportHeight and width/height")

    nodes: list[IrVectorNode] = []
    for child in root:
        if not isinstance(child.tag, str):
            continue
        tag = local_name(child.tag)
        if tag == "path":
            path = _build_path(child)
            if path is not None:
                nodes.append(path)
        elif tag == "group":
            paths = tuple(_group_paths(child))
            if paths:
                nodes.append(IrGroup(nodes=paths))
        elif tag != "clip-path":
            logger.debug("Skipping unsupported element <%s>", tag)

    try:
        vector = IrImageVector(
            default_width=width if width is not None else viewport_width,
            default_height=height if height is not None else viewport_height,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            vector_nodes=tuple(nodes),
            auto_mirror=(_attr(root, "autoMirrored") or "").strip().lower() == "true",
        )
    except ValueError as e:
        raise UnsupportedDocument(str(e)) from e

    logger.info(
        "Parsed vector drawable: %d nodes, viewport %g×%g",
        len(nodes),
        viewport_width,
        viewport_height,
    )
    return vector
