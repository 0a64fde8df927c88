"""Document parser facade: source file or bytes -> ParserOutput.

The dialect is detected from the root element; the file name only feeds the
icon name.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from vectorgen.errors import UnsupportedDocument
from vectorgen.ir import IrImageVector
from vectorgen.parser.name_formatter import format_icon_name, validate_icon_name
from vectorgen.parser.registry import IconType, get_registry

logger = logging.getLogger(__name__)

Source = str | bytes | os.PathLike


@dataclass(frozen=True)
class ParserOutput:
    ir_image_vector: IrImageVector
    icon_name: str
    icon_type: IconType


def _read_source(source: Source) -> tuple[bytes, str]:
    """Return the document bytes and the file name they came from, if any."""
    if isinstance(source, bytes):
        return source, ""
    if isinstance(source, str) and source.lstrip("\ufeff \t\r\n").startswith("<"):
        return source.encode("utf-8"), ""
    path = Path(source)
    with open(path, "rb") as f:
        return f.read(), path.name


def parse_root(data: bytes) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise UnsupportedDocument(f"Malformed XML: {e}") from e


def load_vector(source: Source) -> tuple[IrImageVector, IconType, str]:
    """Parse a document without naming it.

    Returns the unnamed IR, the detected dialect and the source file name
    (empty for in-memory sources).
    """
    data, source_name = _read_source(source)
    root = parse_root(data)
    spec = get_registry().detect(root)
    return spec.fn(root), spec.icon_type, source_name


def parse_document(
    source: Source,
    file_name: str | None = None,
    icon_name: str | None = None,
) -> ParserOutput:
    """Parse an SVG or vector drawable into the IR.

    ``source`` is a path, raw bytes, or XML text. The icon name is derived
    from ``file_name`` (or the path's file name) unless ``icon_name`` is
    given; either way it must be a valid icon name.
    """
    vector, icon_type, source_name = load_vector(source)

    if icon_name is None:
        icon_name = format_icon_name(file_name or source_name)
    validate_icon_name(icon_name)

    logger.debug("Detected %s document for icon %s", icon_type.name, icon_name)
    return ParserOutput(
        ir_image_vector=dataclasses.replace(vector, name=icon_name),
        icon_name=icon_name,
        icon_type=icon_type,
    )
