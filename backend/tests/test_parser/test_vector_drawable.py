"""Tests for the Android vector drawable dialect."""

from __future__ import annotations

import pytest

from vectorgen.errors import UnresolvedPaintReference, UnsupportedDocument
from vectorgen.ir import (
    IrColor,
    IrGroup,
    IrLinearGradient,
    IrPathFillType,
    IrRadialGradient,
    IrStrokeLineCap,
    IrStrokeLineJoin,
)
from vectorgen.ir.path_node import Close, LineTo, MoveTo, RelativeLineTo
from vectorgen.parser import IconType, parse_document
from tests.conftest import SIMPLE_VECTOR_XML

ANDROID = 'xmlns:android="http://schemas.android.com/apk/res/android"'
AAPT = 'xmlns:aapt="http://schemas.android.com/aapt"'


def _vector(body: str, attrs: str = 'android:viewportWidth="24" android:viewportHeight="24"') -> bytes:
    return f"<vector {ANDROID} {AAPT} {attrs}>{body}</vector>".encode()


def _parse(source: bytes):
    return parse_document(source, icon_name="Test").ir_image_vector


class TestVectorDrawable:
    def test_detected_as_xml(self):
        out = parse_document(SIMPLE_VECTOR_XML.encode(), file_name="ic_triangle.xml")
        assert out.icon_type == IconType.XML
        assert out.icon_name == "Triangle"

    def test_opaque_argb_collapses(self):
        (path,) = _parse(SIMPLE_VECTOR_XML.encode()).vector_nodes
        assert path.fill == IrColor("#000000")
        assert path.stroke is None

    def test_no_fill_color_means_no_fill(self):
        (path,) = _parse(_vector('<path android:pathData="M0,0h1v1z"/>')).vector_nodes
        assert path.fill is None

    def test_all_path_params(self, resources):
        vector = parse_document(resources / "xml" / "ic_all_path_params.xml").ir_image_vector
        assert vector.auto_mirror is True
        assert (vector.default_width, vector.viewport_width) == (24, 18)
        (group,) = vector.vector_nodes
        assert isinstance(group, IrGroup)
        (path,) = group.nodes
        assert path.name == "cross"
        assert path.fill == IrColor("#80232F34")
        assert path.fill_alpha == 0.5
        assert path.stroke == IrColor("#232F34")
        assert path.stroke_alpha == 0.6
        assert path.stroke_line_width == 1
        assert path.stroke_line_cap == IrStrokeLineCap.Round
        assert path.stroke_line_join == IrStrokeLineJoin.Bevel
        assert path.stroke_line_miter == 3
        assert path.path_fill_type == IrPathFillType.EvenOdd
        assert path.nodes == (
            MoveTo(6.75, 12.127),
            LineTo(3.623, 9),
            LineTo(2.558, 10.057),
            RelativeLineTo(4.192, 4.193),
            Close(),
        )

    def test_inline_linear_gradient(self, resources):
        (path,) = parse_document(resources / "xml" / "ic_linear_gradient.xml").ir_image_vector.vector_nodes
        assert isinstance(path.fill, IrLinearGradient)
        assert (path.fill.end_x, path.fill.end_y) == (24, 24)
        assert [s.color for s in path.fill.color_stops] == ["#D9D9D9", "#9E9E9E", "#737373"]

    def test_radial_gradient_from_start_end_colors(self):
        body = (
            '<path android:pathData="M0,0h1v1z"><aapt:attr name="android:fillColor">'
            '<gradient android:type="radial" android:centerX="12" android:centerY="12" '
            'android:gradientRadius="6" android:startColor="#FFFFFF" android:endColor="#000000"/>'
            "</aapt:attr></path>"
        )
        (path,) = _parse(_vector(body)).vector_nodes
        assert isinstance(path.fill, IrRadialGradient)
        assert path.fill.radius == 6
        assert [s.offset for s in path.fill.color_stops] == [0.0, 1.0]

    def test_nested_groups_flatten(self):
        body = (
            '<group><path android:pathData="M0,0h1"/>'
            '<group android:rotation="45"><path android:pathData="M1,1h1"/></group></group>'
        )
        (group,) = _parse(_vector(body)).vector_nodes
        assert len(group.nodes) == 2

    def test_resource_reference_is_unresolved(self):
        body = '<path android:fillColor="@color/primary" android:pathData="M0,0h1"/>'
        with pytest.raises(UnresolvedPaintReference, match="@color/primary"):
            _parse(_vector(body))

    def test_viewport_falls_back_to_size(self):
        vector = _parse(_vector("", 'android:width="32dp" android:height="16dp"'))
        assert (vector.viewport_width, vector.viewport_height) == (32, 16)

    def test_missing_dimensions(self):
        with pytest.raises(UnsupportedDocument):
            _parse(_vector("", ""))

    def test_non_finite_viewport_falls_back_to_size(self):
        attrs = (
            'android:width="24dp" android:height="24dp" '
            'android:viewportWidth="nan" android:viewportHeight="inf"'
        )
        vector = _parse(_vector("", attrs))
        assert (vector.viewport_width, vector.viewport_height) == (24, 24)

    def test_deeply_nested_groups(self):
        depth = 3000
        body = "<group>" * depth + '<path android:pathData="M0,0h1"/>' + "</group>" * depth
        (group,) = _parse(_vector(body)).vector_nodes
        assert len(group.nodes) == 1
