"""
vectorgen: convert SVG / Android vector drawables to Compose ImageVector sources.

Usage:
  vectorgen ic_home.svg                         # writes build/icons/Home.kt
  vectorgen icons/ -o app/src/main/kotlin/icons  # batch convert a folder
  vectorgen ic_home.xml --stdout --format lazy   # print instead of writing
  vectorgen icons/ --pack AppIcons --nested Filled --nested Outlined
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from vectorgen import __version__
from vectorgen.config import Settings, configure_logging
from vectorgen.generator import ImageVectorGenerator, OutputFormat
from vectorgen.parser.name_formatter import is_valid_icon_name
from vectorgen.pipeline import (
    BrokenIcon,
    ValidIcon,
    build_default_icon_pack,
    export_icons,
    icon_config,
    import_icons,
)

logger = logging.getLogger(__name__)

_FORMATS = {
    "backing": OutputFormat.BackingProperty,
    "lazy": OutputFormat.LazyProperty,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vectorgen",
        description="Compile SVG / vector drawable icons to Jetpack Compose ImageVector code",
    )
    parser.add_argument("inputs", nargs="+", help="Icon files or folders of icons")
    parser.add_argument("-o", "--output", help="Destination folder for .kt files")
    parser.add_argument("--package", help="Kotlin package of the generated files")
    parser.add_argument("--pack-package", help="Package of the icon pack object")
    parser.add_argument("--pack", help="Icon pack object name, e.g. AppIcons")
    parser.add_argument(
        "--nested",
        action="append",
        default=None,
        help="Nested pack name (repeatable); icons go to the first one",
    )
    parser.add_argument("--format", choices=sorted(_FORMATS), help="Property style")
    parser.add_argument("--preview", action="store_true", default=None, help="Append a @Preview composable")
    parser.add_argument("--flat", action="store_true", default=None, help="Do not split nested packs into sub-packages")
    parser.add_argument("--explicit", action="store_true", default=None, help="Explicit API mode (public modifiers)")
    parser.add_argument("--trailing-comma", action="store_true", default=None, help="Trailing commas in argument lists")
    parser.add_argument("--stdout", action="store_true", help="Print generated code instead of writing files")
    parser.add_argument("--log-level", default=None, help="debug, info, warning, error")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Environment settings overlaid with the flags actually given."""
    base = base or Settings()
    overrides = {
        "package_name": args.package,
        "icon_pack_package": args.pack_package,
        "icon_pack_name": args.pack,
        "nested_packs": args.nested,
        "output_format": _FORMATS[args.format] if args.format else None,
        "generate_preview": args.preview,
        "flat_package": args.flat,
        "use_explicit_mode": args.explicit,
        "add_trailing_comma": args.trailing_comma,
        "icon_pack_destination": args.output,
        "vectorgen_log_level": args.log_level,
    }
    return base.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    configure_logging(settings.vectorgen_log_level)

    icons = import_icons(args.inputs, build_default_icon_pack(settings))
    if not icons:
        print("No .svg or .xml icons found.", file=sys.stderr)
        return 1

    for icon in icons:
        if isinstance(icon, BrokenIcon):
            print(f"  BROKEN {icon.icon_name}.{icon.extension}: {icon.reason}", file=sys.stderr)
        elif not is_valid_icon_name(icon.icon_name):
            print(f"  INVALID NAME {icon.icon_name!r} from {icon.path.name}", file=sys.stderr)

    valid = [
        icon for icon in icons if isinstance(icon, ValidIcon) and is_valid_icon_name(icon.icon_name)
    ]
    if args.stdout:
        for icon in valid:
            output = ImageVectorGenerator.convert(
                vector=replace(icon.vector, name=icon.icon_name),
                icon_name=icon.icon_name,
                config=icon_config(icon, settings),
            )
            sys.stdout.write(output.content)
        converted = len(valid)
    else:
        written = export_icons(valid, settings)
        for path in written:
            print(f"  → Saved: {path}")
        converted = len(written)

    print(f"Done: {converted}/{len(icons)} converted", file=sys.stderr)
    return 0 if converted == len(icons) else 1


if __name__ == "__main__":
    sys.exit(main())
