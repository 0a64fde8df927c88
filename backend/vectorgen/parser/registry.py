"""Dialect registry: every input dialect is a standalone function registered via decorator.

Usage:
    @dialect(icon_type=IconType.SVG, root_tag="svg", extensions={"svg"})
    def parse_svg_root(root: ET.Element) -> IrImageVector:
        ...

Detection goes by the root element's local name, never by file extension.
"""

from __future__ import annotations

import enum
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Callable

from vectorgen.errors import UnsupportedDocument
from vectorgen.ir import IrImageVector
from vectorgen.parser.attributes import local_name

logger = logging.getLogger(__name__)


class IconType(enum.Enum):
    SVG = "SVG"
    XML = "XML"


@dataclass
class DialectSpec:
    icon_type: IconType
    root_tag: str
    fn: Callable[[ET.Element], IrImageVector]
    extensions: set[str] = field(default_factory=set)
    description: str = ""


class DialectRegistry:
    """Registry of input dialects keyed by root element name."""

    def __init__(self) -> None:
        self._dialects: dict[str, DialectSpec] = {}

    def register(self, spec: DialectSpec) -> None:
        if spec.root_tag in self._dialects:
            raise ValueError(f"Duplicate dialect root tag: {spec.root_tag}")
        self._dialects[spec.root_tag] = spec
        logger.debug("Registered dialect %s (<%s>)", spec.icon_type.name, spec.root_tag)

    def get(self, icon_type: IconType) -> DialectSpec:
        for spec in self._dialects.values():
            if spec.icon_type == icon_type:
                return spec
        raise KeyError(icon_type)

    def detect(self, root: ET.Element) -> DialectSpec:
        tag = local_name(root.tag) if isinstance(root.tag, str) else ""
        spec = self._dialects.get(tag)
        if spec is None:
            raise UnsupportedDocument(f"Unsupported root element <{tag}>")
        return spec

    def all(self) -> list[DialectSpec]:
        return sorted(self._dialects.values(), key=lambda s: s.icon_type.value)

    @property
    def extensions(self) -> set[str]:
        return {ext for spec in self._dialects.values() for ext in spec.extensions}

    @property
    def count(self) -> int:
        return len(self._dialects)


# Module-level singleton
_registry = DialectRegistry()


def get_registry() -> DialectRegistry:
    return _registry


def dialect(
    *,
    icon_type: IconType,
    root_tag: str,
    extensions: set[str] | None = None,
    description: str = "",
):
    """Decorator to register a dialect root parser."""

    def decorator(fn: Callable[[ET.Element], IrImageVector]):
        spec = DialectSpec(
            icon_type=icon_type,
            root_tag=root_tag,
            fn=fn,
            extensions=extensions or set(),
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
