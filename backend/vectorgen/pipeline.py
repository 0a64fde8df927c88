"""Conversion orchestrator: single documents and batch icon-pack imports.

The compiler core raises on the first problem in a document. This module is
where failures get isolated: a broken icon is reported and skipped while
the rest of the batch carries on.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path

from vectorgen.config import Settings, settings as default_settings
from vectorgen.errors import ConversionError, InvalidIconName
from vectorgen.generator import (
    ImageVectorGenerator,
    ImageVectorGeneratorConfig,
    ImageVectorSpecOutput,
)
from vectorgen.ir import IrImageVector
from vectorgen.models.icon_pack import IconPack, IconPackNested, IconPackSingle
from vectorgen.parser import IconType, format_icon_name, get_registry, load_vector, parse_document
from vectorgen.parser.document import Source
from vectorgen.parser.name_formatter import is_valid_icon_name, validate_icon_name
from vectorgen.writer import write_to_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    output: ImageVectorSpecOutput
    icon_type: IconType


def convert(
    source: Source,
    config: ImageVectorGeneratorConfig,
    file_name: str | None = None,
    icon_name: str | None = None,
) -> ConversionResult:
    """Parse one document and emit its Kotlin source. Errors propagate."""
    start = time.perf_counter()
    parsed = parse_document(source, file_name=file_name, icon_name=icon_name)
    output = ImageVectorGenerator.convert(
        vector=parsed.ir_image_vector,
        icon_name=parsed.icon_name,
        config=config,
    )
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Converted %s (%s) in %.1fms", parsed.icon_name, parsed.icon_type.name, elapsed)
    return ConversionResult(output=output, icon_type=parsed.icon_type)


def convert_or_empty(
    source: Source,
    config: ImageVectorGeneratorConfig,
    file_name: str | None = None,
    icon_name: str | None = None,
) -> ImageVectorSpecOutput:
    """Like ``convert`` but returns the empty placeholder instead of raising."""
    try:
        return convert(source, config, file_name=file_name, icon_name=icon_name).output
    except (ConversionError, OSError) as e:
        logger.warning("Conversion of %s failed: %s", file_name or source, e)
        return ImageVectorSpecOutput.empty()


# ── Batch import / export ────────────────────────────────────────────────


@dataclass(frozen=True)
class ValidIcon:
    icon_name: str
    extension: str
    icon_pack: IconPack
    path: Path
    vector: IrImageVector


@dataclass(frozen=True)
class BrokenIcon:
    icon_name: str
    extension: str
    reason: str


BatchIcon = ValidIcon | BrokenIcon


def build_default_icon_pack(settings: Settings) -> IconPack:
    if not settings.nested_packs:
        return IconPackSingle(
            icon_pack_name=settings.icon_pack_name,
            icon_package=settings.package_name,
        )
    return IconPackNested(
        icon_pack_name=settings.icon_pack_name,
        icon_package=settings.package_name,
        nested_packs=settings.nested_packs,
        current_nested_pack=settings.nested_packs[0],
    )


def _expand(paths: Iterable[str | Path]) -> list[Path]:
    """Files among ``paths``, with directories replaced by their entries."""
    files: list[Path] = []
    for path in map(Path, paths):
        if path.is_dir():
            files.extend(p for p in path.iterdir() if p.is_file())
        elif path.is_file():
            files.append(path)
    extensions = get_registry().extensions
    return sorted(
        (p for p in files if p.suffix.lower().lstrip(".") in extensions),
        key=lambda p: p.name,
    )


def import_icons(paths: Iterable[str | Path], icon_pack: IconPack | None = None) -> list[BatchIcon]:
    """Parse every icon once; failures become BrokenIcon entries."""
    if icon_pack is None:
        icon_pack = build_default_icon_pack(default_settings)
    icons: list[BatchIcon] = []
    for path in _expand(paths):
        extension = path.suffix.lstrip(".")
        try:
            vector, _, _ = load_vector(path)
        except (ConversionError, OSError) as e:
            logger.warning("Broken icon %s: %s", path.name, e)
            icons.append(BrokenIcon(icon_name=path.stem, extension=extension, reason=str(e)))
            continue
        icons.append(
            ValidIcon(
                icon_name=format_icon_name(path.name),
                extension=extension,
                icon_pack=icon_pack,
                path=path,
                vector=vector,
            )
        )
    broken = sum(isinstance(icon, BrokenIcon) for icon in icons)
    logger.info("Imported %d icons (%d broken)", len(icons), broken)
    return icons


def all_icons_valid(icons: list[BatchIcon]) -> bool:
    return bool(icons) and all(
        isinstance(icon, ValidIcon) and is_valid_icon_name(icon.icon_name) for icon in icons
    )


def rename_icon(icons: list[BatchIcon], icon_name: str, new_name: str) -> list[BatchIcon]:
    return [
        replace(icon, icon_name=new_name)
        if isinstance(icon, ValidIcon) and icon.icon_name == icon_name
        else icon
        for icon in icons
    ]


def delete_icon(icons: list[BatchIcon], icon_name: str) -> list[BatchIcon]:
    return [icon for icon in icons if icon.icon_name != icon_name]


def update_nested_pack(icons: list[BatchIcon], icon_name: str, nested_pack: str) -> list[BatchIcon]:
    updated: list[BatchIcon] = []
    for icon in icons:
        if (
            isinstance(icon, ValidIcon)
            and icon.icon_name == icon_name
            and isinstance(icon.icon_pack, IconPackNested)
        ):
            pack = icon.icon_pack.model_copy(update={"current_nested_pack": nested_pack})
            icon = replace(icon, icon_pack=pack)
        updated.append(icon)
    return updated


def icon_config(icon: ValidIcon, settings: Settings) -> ImageVectorGeneratorConfig:
    nested = icon.icon_pack.current_nested_pack if isinstance(icon.icon_pack, IconPackNested) else ""
    return settings.generator_config(nested_pack_name=nested, package_name=icon.icon_pack.icon_package)


def export_icons(
    icons: list[BatchIcon],
    settings: Settings,
    destination: str | Path | None = None,
) -> list[Path]:
    """Emit and write every valid icon.

    Broken icons and icons whose name is not a valid identifier are skipped
    with a warning; the rest of the batch is still written.
    """
    start = time.perf_counter()
    root = Path(destination or settings.icon_pack_destination)
    written: list[Path] = []
    for icon in icons:
        if not isinstance(icon, ValidIcon):
            continue
        try:
            validate_icon_name(icon.icon_name)
        except InvalidIconName as e:
            logger.warning("Skipping %s: %s", icon.path.name, e)
            continue
        output = ImageVectorGenerator.convert(
            vector=replace(icon.vector, name=icon.icon_name),
            icon_name=icon.icon_name,
            config=icon_config(icon, settings),
        )
        out_directory = root
        if isinstance(icon.icon_pack, IconPackNested) and not settings.flat_package:
            out_directory = root / icon.icon_pack.nested_package
        written.append(write_to_file(output.content, out_directory, output.name))

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Exported %d icons to %s in %.0fms", len(written), root, elapsed)
    return written
