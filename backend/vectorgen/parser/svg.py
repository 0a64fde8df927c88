"""SVG dialect: ``<svg>`` element tree -> IrImageVector.

Two passes over the document:

1. collect every ``<linearGradient>`` / ``<radialGradient>`` by id, so paint
   references resolve regardless of where the definition sits
2. walk the root's children in document order, turning ``<path>`` and basic
   shapes into IrPath and ``<g>`` into IrGroup
"""

from __future__ import annotations

import logging
import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

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
    parse_fraction,
    parse_length,
    parse_line_cap,
    parse_line_join,
    with_alpha,
)
from vectorgen.parser.paint import build_color_stops, first_stop_color
from vectorgen.parser.path_data import parse_path_data, path_bounds
from vectorgen.parser.registry import IconType, dialect
from vectorgen.parser.shapes import SHAPE_TAGS, shape_to_path

logger = logging.getLogger(__name__)

_XLINK_HREF = "{http://www.w3.org/1999/xlink}href"
_URL_RE = re.compile(r"""^url\(\s*['"]?#([^'")]+)['"]?\s*\)""")
_NUMBER_LIST_RE = re.compile(r"[\s,]+")

# Presentation attributes inherited from ancestors.
_INHERITED = (
    "fill",
    "fill-opacity",
    "fill-rule",
    "stroke",
    "stroke-opacity",
    "stroke-width",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
)

# Elements that never draw directly.
_SKIPPED = {
    "defs",
    "title",
    "desc",
    "metadata",
    "style",
    "clipPath",
    "mask",
    "linearGradient",
    "radialGradient",
    "pattern",
    "filter",
    "symbol",
    "script",
}

_GRADIENT_TAGS = {"linearGradient": "linear", "radialGradient": "radial"}


@dataclass
class _GradientDef:
    kind: str
    attrs: dict[str, str]
    stops: list[tuple[float, str]] = field(default_factory=list)
    href: str | None = None


@dataclass
class _DocumentState:
    gradients: dict[str, _GradientDef]
    viewport_width: float
    viewport_height: float


# ── First pass: gradient side-table ──────────────────────────────────────


def _stop_color(stop: ET.Element) -> str:
    color = normalize_color(stop.get("stop-color", "black")) or "#000000"
    opacity = clamp_unit(parse_float(stop.get("stop-opacity"), 1.0))
    return with_alpha(color, opacity)


def _collect_gradients(root: ET.Element) -> dict[str, _GradientDef]:
    gradients: dict[str, _GradientDef] = {}
    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        kind = _GRADIENT_TAGS.get(local_name(element.tag))
        gradient_id = element.get("id")
        if kind is None or not gradient_id:
            continue
        stops = [
            (parse_fraction(stop.get("offset"), 0.0), _stop_color(stop))
            for stop in element
            if isinstance(stop.tag, str) and local_name(stop.tag) == "stop"
        ]
        href = element.get("href") or element.get(_XLINK_HREF)
        gradients[gradient_id] = _GradientDef(
            kind=kind,
            attrs={local_name(k): v for k, v in element.attrib.items()},
            stops=stops,
            href=href[1:] if href and href.startswith("#") else None,
        )
    logger.debug("Collected %d gradient definitions", len(gradients))
    return gradients


def _resolve_definition(gradient_id: str, gradients: dict[str, _GradientDef]) -> _GradientDef:
    """Merge a gradient with the chain of gradients it references via href."""
    base = gradients.get(gradient_id)
    if base is None:
        raise UnresolvedPaintReference(f"url(#{gradient_id})")

    attrs = dict(base.attrs)
    stops = list(base.stops)
    seen = {gradient_id}
    current = base
    while current.href and current.href not in seen:
        seen.add(current.href)
        parent = gradients.get(current.href)
        if parent is None:
            raise UnresolvedPaintReference(f"url(#{current.href})")
        for key, value in parent.attrs.items():
            attrs.setdefault(key, value)
        if not stops:
            stops = list(parent.stops)
        current = parent
    return _GradientDef(kind=base.kind, attrs=attrs, stops=stops)


# ── Paint resolution ─────────────────────────────────────────────────────


def _coordinate(value: str | None, default: str, origin: float, extent: float, user_space: bool) -> float:
    text = (value or default).strip()
    if user_space and not text.endswith("%"):
        length = parse_length(text)
        return length if length is not None else 0.0
    return origin + parse_fraction(text, 0.0) * extent


def _gradient_fill(
    definition: _GradientDef,
    state: _DocumentState,
    bounds: tuple[float, float, float, float] | None,
) -> IrFill:
    attrs = definition.attrs
    user_space = attrs.get("gradientUnits") == "userSpaceOnUse"
    if user_space or bounds is None:
        x0, y0, width, height = 0.0, 0.0, state.viewport_width, state.viewport_height
    else:
        x0, y0 = bounds[0], bounds[1]
        width, height = bounds[2] - bounds[0], bounds[3] - bounds[1]
    if "gradientTransform" in attrs:
        logger.warning("Ignoring gradientTransform on gradient %s", attrs.get("id"))

    stops = build_color_stops(definition.stops)
    if definition.kind == "linear":
        return IrLinearGradient(
            start_x=_coordinate(attrs.get("x1"), "0%", x0, width, user_space),
            start_y=_coordinate(attrs.get("y1"), "0%", y0, height, user_space),
            end_x=_coordinate(attrs.get("x2"), "100%", x0, width, user_space),
            end_y=_coordinate(attrs.get("y2"), "0%", y0, height, user_space),
            color_stops=stops,
        )
    # Percent radii are relative to the normalized diagonal.
    diagonal = math.sqrt((width * width + height * height) / 2.0)
    return IrRadialGradient(
        center_x=_coordinate(attrs.get("cx"), "50%", x0, width, user_space),
        center_y=_coordinate(attrs.get("cy"), "50%", y0, height, user_space),
        radius=_coordinate(attrs.get("r"), "50%", 0.0, diagonal, user_space),
        color_stops=stops,
    )


def _resolve_paint(
    value: str,
    state: _DocumentState,
    nodes: list,
) -> IrFill | None:
    text = value.strip()
    if text == "none":
        return None
    match = _URL_RE.match(text)
    if match:
        definition = _resolve_definition(match.group(1), state.gradients)
        user_space = definition.attrs.get("gradientUnits") == "userSpaceOnUse"
        bounds = None if user_space else path_bounds(nodes)
        return _gradient_fill(definition, state, bounds)
    color = normalize_color(text)
    if color is None:
        logger.warning("Unrecognized color %r, using black", text)
        color = "#000000"
    return IrColor(color)


# ── Second pass: document walk ───────────────────────────────────────────


def _cascade(element: ET.Element, style: dict[str, str], opacity: float) -> tuple[dict[str, str], float]:
    merged = dict(style)
    for key in _INHERITED:
        value = element.get(key)
        if value is not None and value.strip() != "inherit":
            merged[key] = value.strip()
    own_opacity = clamp_unit(parse_float(element.get("opacity"), 1.0))
    if element.get("transform"):
        logger.warning("Ignoring transform on <%s>", local_name(element.tag))
    return merged, opacity * own_opacity


def _build_path(
    element: ET.Element,
    tag: str,
    style: dict[str, str],
    opacity: float,
    state: _DocumentState,
) -> IrPath | None:
    data = element.get("d") if tag == "path" else shape_to_path(tag, element.attrib)
    if not data:
        logger.debug("Skipping <%s> without geometry", tag)
        return None
    nodes = parse_path_data(data)
    if not nodes:
        return None

    fill = _resolve_paint(style.get("fill", "black"), state, nodes)
    stroke_paint = _resolve_paint(style.get("stroke", "none"), state, nodes)
    stroke: IrColor | None = None
    if stroke_paint is not None:
        if not isinstance(stroke_paint, IrColor):
            logger.warning("Gradient strokes are not supported, using first stop color")
        stroke = IrColor(first_stop_color(stroke_paint))

    fill_alpha = clamp_unit(parse_float(style.get("fill-opacity"), 1.0) * opacity)
    stroke_alpha = clamp_unit(parse_float(style.get("stroke-opacity"), 1.0) * opacity)

    stroke_kwargs = {}
    if stroke is not None:
        width = parse_length(style.get("stroke-width"))
        stroke_kwargs = dict(
            stroke_line_width=max(0.0, 1.0 if width is None else width),
            stroke_line_cap=parse_line_cap(style.get("stroke-linecap")),
            stroke_line_join=parse_line_join(style.get("stroke-linejoin")),
            stroke_line_miter=parse_float(style.get("stroke-miterlimit"), 4.0),
        )

    return IrPath(
        fill=fill,
        fill_alpha=fill_alpha,
        stroke=stroke,
        stroke_alpha=stroke_alpha,
        path_fill_type=parse_fill_type(style.get("fill-rule")),
        nodes=tuple(nodes),
        **stroke_kwargs,
    )


def _drawables(element: ET.Element, style: dict[str, str], opacity: float, state: _DocumentState):
    """Paths drawn by ``element`` and its descendants, in document order.

    Walks with an explicit stack, so nesting depth is bounded only by memory.
    """
    stack = [(element, style, opacity)]
    while stack:
        element, style, opacity = stack.pop()
        if not isinstance(element.tag, str):
            continue
        tag = local_name(element.tag)
        if tag in _SKIPPED:
            continue
        own_style, own_opacity = _cascade(element, style, opacity)
        if tag == "g":
            # Reversed so the first child is popped first.
            stack.extend((child, own_style, own_opacity) for child in reversed(list(element)))
        elif tag == "path" or tag in SHAPE_TAGS:
            path = _build_path(element, tag, own_style, own_opacity, state)
            if path is not None:
                yield path
        else:
            logger.debug("Skipping unsupported element <%s>", tag)


def _walk(root: ET.Element, style: dict[str, str], opacity: float, state: _DocumentState) -> list[IrVectorNode]:
    nodes: list[IrVectorNode] = []
    for child in root:
        if isinstance(child.tag, str) and local_name(child.tag) == "g":
            # Nested groups are flattened into the top-level one.
            paths = tuple(_drawables(child, style, opacity, state))
            if paths:
                nodes.append(IrGroup(nodes=paths))
        else:
            nodes.extend(_drawables(child, style, opacity, state))
    return nodes


# ── Viewport ─────────────────────────────────────────────────────────────


def _viewport(root: ET.Element) -> tuple[float, float, float, float]:
    """Return (default_width, default_height, viewport_width, viewport_height)."""
    width = parse_length(root.get("width"))
    height = parse_length(root.get("height"))

    view_box = root.get("viewBox")
    if view_box:
        try:
            parts = [float(p) for p in _NUMBER_LIST_RE.split(view_box.strip())]
        except ValueError:
            parts = []
        if len(parts) != 4 or not all(math.isfinite(p) for p in parts):
            raise UnsupportedDocument(f"Invalid viewBox: {view_box!r}")
        if parts[0] or parts[1]:
            logger.warning("Ignoring viewBox origin (%s, %s)", parts[0], parts[1])
        viewport_width, viewport_height = parts[2], parts[3]
    elif width is not None and height is not None:
        viewport_width, viewport_height = width, height
    else:
        raise UnsupportedDocument("Missing viewBox and width/height")

    return (
        width if width is not None else viewport_width,
        height if height is not None else viewport_height,
        viewport_width,
        viewport_height,
    )


@dialect(
    icon_type=IconType.SVG,
    root_tag="svg",
    extensions={"svg"},
    description="W3C Scalable Vector Graphics",
)
def parse_svg_root(root: ET.Element) -> IrImageVector:
    default_width, default_height, viewport_width, viewport_height = _viewport(root)
    state = _DocumentState(
        gradients=_collect_gradients(root),
        viewport_width=viewport_width,
        viewport_height=viewport_height,
    )
    style, opacity = _cascade(root, {}, 1.0)
    nodes = _walk(root, style, opacity, state)

    try:
        vector = IrImageVector(
            default_width=default_width,
            default_height=default_height,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            vector_nodes=tuple(nodes),
        )
    except ValueError as e:
        raise UnsupportedDocument(str(e)) from e

    logger.info(
        "Parsed SVG: %d nodes, viewport %g×%g",
        len(nodes),
        viewport_width,
        viewport_height,
    )
    return vector
