"""Tests for the Kotlin ImageVector emitter, including golden files."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from vectorgen.generator import ImageVectorGenerator, ImageVectorGeneratorConfig, OutputFormat
from vectorgen.ir import IrColor, IrGroup, IrImageVector, IrPath
from vectorgen.ir.path_node import ArcTo, Close, MoveTo, RelativeReflectiveQuadTo
from vectorgen.parser import parse_document
from tests.conftest import PACKAGE, PACK_NAME


def _emit(resources, source: str, config: ImageVectorGeneratorConfig) -> str:
    parsed = parse_document(resources / source)
    return ImageVectorGenerator.convert(parsed.ir_image_vector, parsed.icon_name, config).content


def _golden(resources, name: str) -> str:
    return (resources / "kt" / name).read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Golden files
# ---------------------------------------------------------------------------

class TestGolden:
    def test_linear_gradient_backing(self, resources, backing_config):
        content = _emit(resources, "svg/ic_linear_gradient.svg", backing_config)
        assert content == _golden(resources, "backing/LinearGradient.kt")

    def test_linear_gradient_lazy(self, resources, lazy_config):
        content = _emit(resources, "svg/ic_linear_gradient.svg", lazy_config)
        assert content == _golden(resources, "lazy/LinearGradient.kt")

    def test_radial_gradient_backing(self, resources, backing_config):
        content = _emit(resources, "svg/ic_radial_gradient.svg", backing_config)
        assert content == _golden(resources, "backing/RadialGradient.kt")

    def test_radial_gradient_lazy(self, resources, lazy_config):
        content = _emit(resources, "svg/ic_radial_gradient.svg", lazy_config)
        assert content == _golden(resources, "lazy/RadialGradient.kt")

    def test_vector_drawable_matches_svg(self, resources, backing_config):
        content = _emit(resources, "xml/ic_linear_gradient.xml", backing_config)
        assert content == _golden(resources, "backing/LinearGradient.kt")

    def test_stroke_group_with_all_options(self, resources, lazy_config):
        config = lazy_config.model_copy(
            update={
                "icon_pack_package": "io.github.composegears.valkyrie",
                "generate_preview": True,
                "use_explicit_mode": True,
                "add_trailing_comma": True,
            }
        )
        content = _emit(resources, "svg/ic_stroke_group.svg", config)
        assert content == _golden(resources, "lazy/StrokeGroup.kt")


# ---------------------------------------------------------------------------
# Behavior
# ---------------------------------------------------------------------------

class TestEmitter:
    def test_deterministic(self, resources, backing_config):
        first = _emit(resources, "svg/ic_stroke_group.svg", backing_config)
        second = _emit(resources, "svg/ic_stroke_group.svg", backing_config)
        assert first == second

    def test_output_name(self, backing_config):
        vector = IrImageVector(24, 24, 24, 24)
        output = ImageVectorGenerator.convert(vector, "Empty", backing_config)
        assert output.name == "Empty"
        assert "ImageVector.Builder(" in output.content
        assert ").apply {\n" in output.content

    def test_preview_does_not_alter_declaration(self, resources, lazy_config):
        plain = _emit(resources, "svg/ic_linear_gradient.svg", lazy_config)
        with_preview = _emit(
            resources,
            "svg/ic_linear_gradient.svg",
            lazy_config.model_copy(update={"generate_preview": True}),
        )
        declaration = plain.split("\n\n", 2)[2]
        assert declaration in with_preview
        assert "private fun LinearGradientPreview()" in with_preview
        assert "Modifier.size(100.dp)" in with_preview

    def test_gradient_stop_order_is_preserved(self, resources, backing_config):
        content = _emit(resources, "svg/ic_linear_gradient.svg", backing_config)
        first = content.index("0f to Color(0xFFD9D9D9)")
        second = content.index("0.5f to Color(0xFF9E9E9E)")
        third = content.index("1f to Color(0xFF737373)")
        assert first < second < third

    def test_nested_pack(self, backing_config):
        config = backing_config.model_copy(update={"nested_pack_name": "Filled"})
        content = ImageVectorGenerator.convert(IrImageVector(24, 24, 24, 24), "Home", config).content
        assert content.startswith(f"package {PACKAGE}.filled\n")
        assert f"import {PACKAGE}.{PACK_NAME}\n" in content
        assert f"val {PACK_NAME}.Filled.Home: ImageVector" in content

    def test_nested_pack_flat_package(self, backing_config):
        config = backing_config.model_copy(update={"nested_pack_name": "Filled", "use_flat_package": True})
        content = ImageVectorGenerator.convert(IrImageVector(24, 24, 24, 24), "Home", config).content
        assert content.startswith(f"package {PACKAGE}\n")
        assert f"import {PACKAGE}.{PACK_NAME}\n" not in content
        assert f"val {PACK_NAME}.Filled.Home: ImageVector" in content

    def test_no_pack(self):
        config = ImageVectorGeneratorConfig(package_name="com.example")
        content = ImageVectorGenerator.convert(IrImageVector(24, 24, 24, 24), "Home", config).content
        assert "val Home: ImageVector" in content

    def test_explicit_mode(self, backing_config):
        config = backing_config.model_copy(update={"use_explicit_mode": True})
        content = ImageVectorGenerator.convert(IrImageVector(24, 24, 24, 24), "Home", config).content
        assert f"public val {PACK_NAME}.Home: ImageVector" in content
        assert "private var _Home: ImageVector? = null" in content

    def test_auto_mirror_and_path_name(self, backing_config):
        path = IrPath(name="cross", fill=IrColor("#80232F34"), nodes=(MoveTo(0, 0), Close()))
        vector = IrImageVector(24, 24, 18, 18, vector_nodes=(IrGroup(nodes=(path,)),), auto_mirror=True)
        content = ImageVectorGenerator.convert(vector, "Cross", backing_config).content
        assert "            viewportHeight = 18f,\n            autoMirror = true\n" in content
        assert 'name = "cross",' in content
        assert "fill = SolidColor(Color(0x80232F34))" in content
        assert "group {" in content

    def test_all_path_params(self, resources, backing_config):
        content = _emit(resources, "xml/ic_all_path_params.xml", backing_config)
        expected = """\
            group {
                path(
                    name = "cross",
                    fill = SolidColor(Color(0x80232F34)),
                    fillAlpha = 0.5f,
                    stroke = SolidColor(Color(0xFF232F34)),
                    strokeAlpha = 0.6f,
                    strokeLineWidth = 1f,
                    strokeLineCap = StrokeCap.Round,
                    strokeLineJoin = StrokeJoin.Bevel,
                    strokeLineMiter = 3f,
                    pathFillType = PathFillType.EvenOdd
                ) {
                    moveTo(6.75f, 12.127f)
                    lineTo(3.623f, 9f)
                    lineTo(2.558f, 10.057f)
                    lineToRelative(4.192f, 4.193f)
                    close()
                }
            }
"""
        assert expected in content

    def test_path_command_names(self, backing_config):
        path = IrPath(
            fill=IrColor("#000000"),
            nodes=(MoveTo(1, 1), ArcTo(5, 5, 0, True, False, 10, 10), RelativeReflectiveQuadTo(-0.5, 1e-7)),
        )
        content = ImageVectorGenerator.convert(
            IrImageVector(24, 24, 24, 24, vector_nodes=(path,)), "Arc", backing_config
        ).content
        assert "arcTo(5f, 5f, 0f, true, false, 10f, 10f)" in content
        assert "reflectiveQuadToRelative(-0.5f, 0f)" in content


class TestConfig:
    def test_closed_config(self):
        with pytest.raises(ValidationError):
            ImageVectorGeneratorConfig(package_name="a", unknown_option=True)

    def test_frozen_config(self, backing_config):
        with pytest.raises(ValidationError):
            backing_config.package_name = "other"

    def test_output_format_values(self):
        config = ImageVectorGeneratorConfig(package_name="a", output_format="LazyProperty")
        assert config.output_format == OutputFormat.LazyProperty
