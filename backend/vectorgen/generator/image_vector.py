"""IR -> Kotlin ``ImageVector`` source file."""

from __future__ import annotations

import logging
from typing import assert_never

from vectorgen.generator.config import (
    ImageVectorGeneratorConfig,
    ImageVectorSpecOutput,
    OutputFormat,
)
from vectorgen.generator.formatting import (
    call,
    format_dp,
    format_float,
    indent,
    kotlin_string,
)
from vectorgen.generator.nodes import emit_vector_node
from vectorgen.ir import IrImageVector

logger = logging.getLogger(__name__)

IMPORT_IMAGE_VECTOR = "androidx.compose.ui.graphics.vector.ImageVector"
IMPORT_DP = "androidx.compose.ui.unit.dp"

PREVIEW_IMPORTS = (
    "androidx.compose.foundation.Image",
    "androidx.compose.foundation.layout.Box",
    "androidx.compose.foundation.layout.padding",
    "androidx.compose.foundation.layout.size",
    "androidx.compose.runtime.Composable",
    "androidx.compose.ui.Modifier",
    "androidx.compose.ui.tooling.preview.Preview",
)

# Canvas the preview renders the icon at.
PREVIEW_SIZE_DP = 100


class ImageVectorGenerator:
    """Emits one Kotlin file declaring an ``ImageVector`` property."""

    @staticmethod
    def convert(
        vector: IrImageVector,
        icon_name: str,
        config: ImageVectorGeneratorConfig,
    ) -> ImageVectorSpecOutput:
        return ImageVectorSpecOutput(
            name=icon_name,
            content=_FileEmitter(vector, icon_name, config).emit(),
        )


class _FileEmitter:
    def __init__(self, vector: IrImageVector, icon_name: str, config: ImageVectorGeneratorConfig) -> None:
        self.vector = vector
        self.icon_name = icon_name
        self.config = config
        self.imports: set[str] = {IMPORT_IMAGE_VECTOR, IMPORT_DP}

    @property
    def package(self) -> str:
        config = self.config
        if config.nested_pack_name and not config.use_flat_package:
            return f"{config.package_name}.{config.nested_pack_name.lower()}"
        return config.package_name

    @property
    def receiver(self) -> str:
        """``Pack.Nested.`` qualifier of the property, empty without a pack."""
        config = self.config
        if not config.pack_name:
            return ""
        if config.nested_pack_name:
            return f"{config.pack_name}.{config.nested_pack_name}."
        return f"{config.pack_name}."

    @property
    def visibility(self) -> str:
        return "public " if self.config.use_explicit_mode else ""

    @property
    def backing_name(self) -> str:
        return f"_{self.icon_name}"

    def emit(self) -> str:
        builder = self._builder()
        match self.config.output_format:
            case OutputFormat.BackingProperty:
                declaration = self._backing_property(builder)
            case OutputFormat.LazyProperty:
                declaration = self._lazy_property(builder)
            case _:
                assert_never(self.config.output_format)

        preview: list[str] = []
        if self.config.generate_preview:
            self.imports.update(PREVIEW_IMPORTS)
            preview = [""] + self._preview()

        self._add_pack_import()

        lines: list[str] = []
        if self.package:
            lines += [f"package {self.package}", ""]
        lines += [f"import {name}" for name in sorted(self.imports)]
        lines += [""] + declaration + preview
        logger.debug(
            "Emitted %s (%s, %d lines)",
            self.icon_name,
            self.config.output_format.value,
            len(lines),
        )
        return "\n".join(lines) + "\n"

    def _add_pack_import(self) -> None:
        config = self.config
        if config.pack_name and config.icon_pack_package and config.icon_pack_package != self.package:
            self.imports.add(f"{config.icon_pack_package}.{config.pack_name}")

    def _builder(self) -> list[str]:
        """``ImageVector.Builder(...).apply { ... }.build()`` expression."""
        vector = self.vector
        trailing_comma = self.config.add_trailing_comma
        args = [
            [f"name = {kotlin_string(self.icon_name)}"],
            [f"defaultWidth = {format_dp(vector.default_width)}"],
            [f"defaultHeight = {format_dp(vector.default_height)}"],
            [f"viewportWidth = {format_float(vector.viewport_width)}"],
            [f"viewportHeight = {format_float(vector.viewport_height)}"],
        ]
        if vector.auto_mirror:
            args.append(["autoMirror = true"])

        body = [
            line
            for node in vector.vector_nodes
            for line in emit_vector_node(node, self.imports, trailing_comma)
        ]
        return call("ImageVector.Builder", args, trailing_comma, close=").apply {") + indent(body) + ["}.build()"]

    def _backing_property(self, builder: list[str]) -> list[str]:
        name = self.backing_name
        assignment = [f"{name} = {builder[0]}"] + builder[1:]
        getter = [
            f"if ({name} != null) {{",
            f"    return {name}!!",
            "}",
            *assignment,
            "",
            f"return {name}!!",
        ]
        return [
            f"{self.visibility}val {self.receiver}{self.icon_name}: ImageVector",
            "    get() {",
            *indent(getter, 2),
            "    }",
            "",
            '@Suppress("ObjectPropertyName")',
            f"private var {name}: ImageVector? = null",
        ]

    def _lazy_property(self, builder: list[str]) -> list[str]:
        return [
            f"{self.visibility}val {self.receiver}{self.icon_name}: ImageVector "
            "by lazy(LazyThreadSafetyMode.NONE) {",
            *indent(builder),
            "}",
        ]

    def _preview(self) -> list[str]:
        reference = f"{self.receiver}{self.icon_name}"
        return [
            "@Preview",
            "@Composable",
            f"private fun {self.icon_name}Preview() {{",
            "    Box(modifier = Modifier.padding(12.dp)) {",
            "        Image(",
            f"            imageVector = {reference},",
            "            contentDescription = null,",
            f"            modifier = Modifier.size({PREVIEW_SIZE_DP}.dp)" + ("," if self.config.add_trailing_comma else ""),
            "        )",
            "    }",
            "}",
        ]
