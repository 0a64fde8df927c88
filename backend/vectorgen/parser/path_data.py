"""Path data parser: raw ``d`` / ``android:pathData`` string -> IR path commands.

Shared by the SVG and vector-drawable dialects. Grammar notes:

- numbers may be separated by whitespace, commas, or nothing at all when the
  next number starts with a sign or a second decimal point (``10-5``, ``1.5.5``)
- scientific notation is accepted (``1e-3``)
- extra argument groups implicitly repeat the previous command; extra pairs
  after a moveto are linetos
- arc flags are exactly one ``0``/``1`` character and may be glued to the
  following number (``a5 5 0 1010 10``)

The module also provides the cursor fold used to resolve relative and
reflective commands into absolute points.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from vectorgen.errors import MalformedPathData
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

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SEPARATOR_RE = re.compile(r"[\s,]*")

# Number of arguments consumed by one invocation of each command.
_ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

_ABSOLUTE: dict[str, type] = {
    "M": MoveTo,
    "L": LineTo,
    "H": HorizontalTo,
    "V": VerticalTo,
    "C": CurveTo,
    "S": ReflectiveCurveTo,
    "Q": QuadTo,
    "T": ReflectiveQuadTo,
    "A": ArcTo,
}

_RELATIVE: dict[str, type] = {
    "M": RelativeMoveTo,
    "L": RelativeLineTo,
    "H": RelativeHorizontalTo,
    "V": RelativeVerticalTo,
    "C": RelativeCurveTo,
    "S": RelativeReflectiveCurveTo,
    "Q": RelativeQuadTo,
    "T": RelativeReflectiveQuadTo,
    "A": RelativeArcTo,
}


class _Scanner:
    """Character-level cursor over the raw path string."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        self.pos = 0

    def skip_separators(self) -> None:
        self.pos = _SEPARATOR_RE.match(self.raw, self.pos).end()

    def at_end(self) -> bool:
        self.skip_separators()
        return self.pos >= len(self.raw)

    def at_number(self) -> bool:
        self.skip_separators()
        return _NUMBER_RE.match(self.raw, self.pos) is not None

    def number(self) -> float:
        self.skip_separators()
        match = _NUMBER_RE.match(self.raw, self.pos)
        if match is None:
            raise MalformedPathData("Expected a number", self.raw, self.pos)
        value = float(match.group(0))
        if not math.isfinite(value):
            raise MalformedPathData("Number out of range", self.raw, self.pos)
        self.pos = match.end()
        return value

    def flag(self) -> bool:
        self.skip_separators()
        char = self.raw[self.pos] if self.pos < len(self.raw) else ""
        if char not in ("0", "1"):
            raise MalformedPathData("Expected an arc flag (0 or 1)", self.raw, self.pos)
        self.pos += 1
        return char == "1"


def _read_args(scanner: _Scanner, command: str) -> tuple:
    if command == "A":
        rx = scanner.number()
        ry = scanner.number()
        theta = scanner.number()
        large_arc = scanner.flag()
        sweep = scanner.flag()
        return (rx, ry, theta, large_arc, sweep, scanner.number(), scanner.number())
    return tuple(scanner.number() for _ in range(_ARITY[command]))


def parse_path_data(raw: str) -> list[IrPathNode]:
    """Parse a path data string into an ordered list of IR path commands.

    Raises MalformedPathData on an unknown command letter, arguments without
    a command, or an argument group that does not match the command arity.
    """
    scanner = _Scanner(raw)
    nodes: list[IrPathNode] = []
    last_command = ""

    while not scanner.at_end():
        letter = raw[scanner.pos]
        command = letter.upper()

        if command not in _ARITY:
            if scanner.at_number():
                if last_command == "Z":
                    raise MalformedPathData("Close command takes no arguments", raw, scanner.pos)
                raise MalformedPathData("Arguments without a command", raw, scanner.pos)
            raise MalformedPathData(f"Unknown path command {letter!r}", raw, scanner.pos)

        scanner.pos += 1
        last_command = command
        if command == "Z":
            nodes.append(Close())
            continue

        relative = letter.islower()
        node_type = (_RELATIVE if relative else _ABSOLUTE)[command]
        while True:
            nodes.append(node_type(*_read_args(scanner, command)))
            if not scanner.at_number():
                break
            if command == "M":
                # Implicit repetition after a moveto draws lines.
                node_type = RelativeLineTo if relative else LineTo

    logger.debug("Parsed path data into %d commands", len(nodes))
    return nodes


# ── Cursor fold ──────────────────────────────────────────────────────────


Point = tuple[float, float]


@dataclass(frozen=True)
class PathCursor:
    """Absolute pen state after a command.

    ``cubic_control`` / ``quad_control`` hold the last control point of a
    preceding curve of that family, or None when the previous command was of
    another kind. ``points`` are the absolute control and end points the
    command touched.
    """

    x: float = 0.0
    y: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0
    cubic_control: Point | None = None
    quad_control: Point | None = None
    points: tuple[Point, ...] = ()


def _reflect(control: Point | None, x: float, y: float) -> Point:
    # No preceding curve of the same family: the control point collapses onto the cursor.
    if control is None:
        return (x, y)
    return (2 * x - control[0], 2 * y - control[1])


def advance(cursor: PathCursor, node: IrPathNode) -> PathCursor:
    """Return the cursor after applying ``node`` to ``cursor``."""
    cx, cy = cursor.x, cursor.y
    match node:
        case Close():
            end = (cursor.start_x, cursor.start_y)
            return PathCursor(end[0], end[1], end[0], end[1], points=(end,))
        case MoveTo(x, y):
            return PathCursor(x, y, x, y, points=((x, y),))
        case RelativeMoveTo(x, y):
            return PathCursor(cx + x, cy + y, cx + x, cy + y, points=((cx + x, cy + y),))
        case LineTo(x, y):
            end = (x, y)
        case RelativeLineTo(x, y):
            end = (cx + x, cy + y)
        case HorizontalTo(x):
            end = (x, cy)
        case RelativeHorizontalTo(x):
            end = (cx + x, cy)
        case VerticalTo(y):
            end = (cx, y)
        case RelativeVerticalTo(y):
            end = (cx, cy + y)
        case CurveTo(x1, y1, x2, y2, x3, y3):
            return _cubic(cursor, (x1, y1), (x2, y2), (x3, y3))
        case RelativeCurveTo(dx1, dy1, dx2, dy2, dx3, dy3):
            return _cubic(cursor, (cx + dx1, cy + dy1), (cx + dx2, cy + dy2), (cx + dx3, cy + dy3))
        case ReflectiveCurveTo(x1, y1, x2, y2):
            first = _reflect(cursor.cubic_control, cx, cy)
            return _cubic(cursor, first, (x1, y1), (x2, y2))
        case RelativeReflectiveCurveTo(x1, y1, x2, y2):
            first = _reflect(cursor.cubic_control, cx, cy)
            return _cubic(cursor, first, (cx + x1, cy + y1), (cx + x2, cy + y2))
        case QuadTo(x1, y1, x2, y2):
            return _quad(cursor, (x1, y1), (x2, y2))
        case RelativeQuadTo(x1, y1, x2, y2):
            return _quad(cursor, (cx + x1, cy + y1), (cx + x2, cy + y2))
        case ReflectiveQuadTo(x, y):
            return _quad(cursor, _reflect(cursor.quad_control, cx, cy), (x, y))
        case RelativeReflectiveQuadTo(x, y):
            return _quad(cursor, _reflect(cursor.quad_control, cx, cy), (cx + x, cy + y))
        case ArcTo(x=x, y=y):
            end = (x, y)
        case RelativeArcTo(x=x, y=y):
            end = (cx + x, cy + y)
        case _:
            raise TypeError(f"Unknown path node: {node!r}")
    return PathCursor(end[0], end[1], cursor.start_x, cursor.start_y, points=(end,))


def _cubic(cursor: PathCursor, c1: Point, c2: Point, end: Point) -> PathCursor:
    return PathCursor(
        end[0], end[1], cursor.start_x, cursor.start_y,
        cubic_control=c2,
        points=(c1, c2, end),
    )


def _quad(cursor: PathCursor, control: Point, end: Point) -> PathCursor:
    return PathCursor(
        end[0], end[1], cursor.start_x, cursor.start_y,
        quad_control=control,
        points=(control, end),
    )


def trace_path(nodes: Iterable[IrPathNode]) -> Iterator[PathCursor]:
    """Yield the absolute cursor after each command, starting from (0, 0)."""
    cursor = PathCursor()
    for node in nodes:
        cursor = advance(cursor, node)
        yield cursor


def path_bounds(nodes: Iterable[IrPathNode]) -> tuple[float, float, float, float] | None:
    """Bounding box (xmin, ymin, xmax, ymax) of all end and control points.

    Control points make this a conservative hull of the curves; arcs only
    contribute their end points.
    """
    points = [p for cursor in trace_path(nodes) for p in cursor.points]
    if not points:
        return None
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


# ── Serialization ────────────────────────────────────────────────────────

_LETTERS: dict[type, str] = {
    **{cls: letter for letter, cls in _ABSOLUTE.items()},
    **{cls: letter.lower() for letter, cls in _RELATIVE.items()},
}


def _fmt(value: float | bool) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_path_data(nodes: Iterable[IrPathNode]) -> str:
    """Serialize IR path commands back to compact path data."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Close):
            parts.append("Z")
            continue
        args = ",".join(_fmt(v) for v in vars(node).values())
        parts.append(f"{_LETTERS[type(node)]}{args}")
    return " ".join(parts)
