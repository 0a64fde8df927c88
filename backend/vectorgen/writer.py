"""Write generated sources to disk."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_to_file(content: str, out_directory: str | Path, file_name: str) -> Path:
    """Create or overwrite ``<out_directory>/<file_name>.kt``."""
    directory = Path(out_directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{file_name}.kt"
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", path, len(content))
    return path
