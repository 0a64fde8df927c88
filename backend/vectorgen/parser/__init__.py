"""Front end: SVG / vector drawable documents -> IR."""

# Importing the dialect modules fires their @dialect registrations.
from vectorgen.parser import svg, vector_drawable  # noqa: F401
from vectorgen.parser.document import ParserOutput, load_vector, parse_document
from vectorgen.parser.name_formatter import format_icon_name, validate_icon_name
from vectorgen.parser.path_data import parse_path_data
from vectorgen.parser.registry import IconType, get_registry

__all__ = [
    "IconType",
    "ParserOutput",
    "format_icon_name",
    "get_registry",
    "load_vector",
    "parse_document",
    "parse_path_data",
    "validate_icon_name",
]
