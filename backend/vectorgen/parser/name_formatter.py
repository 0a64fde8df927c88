"""Icon name derivation: source file name -> capitalized-word identifier."""

from __future__ import annotations

import re

from vectorgen.errors import InvalidIconName

_EXTENSION_RE = re.compile(r"\.(?:svg|xml)$", re.IGNORECASE)
_WORD_SPLIT_RE = re.compile(r"[_\-]+")

# Resource-style prefixes stripped before formatting, e.g. ic_home.xml -> Home.
ICON_PREFIXES = ("ic_",)


def format_icon_name(file_name: str) -> str:
    """Derive an icon name from a file name.

    Strips the extension and a known prefix, splits on ``_`` and ``-`` and
    capitalizes each word. Names that are already well formed come back
    unchanged. Spaces are kept, see ``validate_icon_name``.
    """
    name = _EXTENSION_RE.sub("", file_name.strip())
    for prefix in ICON_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
            break
    words = [w for w in _WORD_SPLIT_RE.split(name) if w]
    return "".join(w[0].upper() + w[1:] for w in words)


def is_valid_icon_name(name: str) -> bool:
    return bool(name) and not any(ch.isspace() for ch in name)


def validate_icon_name(name: str) -> str:
    if not is_valid_icon_name(name):
        raise InvalidIconName(name)
    return name
