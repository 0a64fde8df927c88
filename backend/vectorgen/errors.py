"""Conversion error taxonomy.

Every error raised by the compiler core is a ``ConversionError`` so that
orchestration code (pipeline, API, CLI) can isolate a failing document with a
single ``except`` clause and carry on with the rest of a batch.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for recoverable per-document conversion failures."""


class MalformedPathData(ConversionError):
    """Path data contains an unknown command or a wrong number of arguments."""

    def __init__(self, message: str, raw: str = "", position: int = -1) -> None:
        if position >= 0:
            message = f"{message} at position {position}"
        super().__init__(message)
        self.raw = raw
        self.position = position


class UnsupportedDocument(ConversionError):
    """Root element is neither an SVG root nor a vector-drawable root."""


class UnresolvedPaintReference(ConversionError):
    """A paint reference (``url(#id)``, ``@color/...``) has no definition."""

    def __init__(self, reference: str) -> None:
        super().__init__(f"Unresolved paint reference: {reference}")
        self.reference = reference


class InvalidIconName(ConversionError):
    """Derived icon name is empty or contains whitespace."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid icon name: {name!r}")
        self.name = name
