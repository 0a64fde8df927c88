"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from vectorgen.main import app
from tests.conftest import CIRCLE_SVG, LINEAR_GRADIENT_SVG, SIMPLE_VECTOR_XML


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["dialects"] == ["SVG", "XML"]


def test_convert_svg():
    response = client.post(
        "/api/convert",
        json={"content": LINEAR_GRADIENT_SVG, "file_name": "ic_linear_gradient.svg"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "LinearGradient"
    assert data["icon_type"] == "SVG"
    assert data["error"] is None
    assert "Brush.linearGradient(" in data["content"]


def test_convert_with_options():
    response = client.post(
        "/api/convert",
        json={
            "content": SIMPLE_VECTOR_XML,
            "file_name": "ic_triangle.xml",
            "config": {
                "package_name": "com.example",
                "pack_name": "Icons",
                "output_format": "LazyProperty",
                "generate_preview": True,
            },
        },
    )
    data = response.json()
    assert data["icon_type"] == "XML"
    assert data["content"].startswith("package com.example\n")
    assert "val Icons.Triangle: ImageVector by lazy" in data["content"]
    assert "@Preview" in data["content"]


def test_convert_error_returns_placeholder():
    response = client.post("/api/convert", json={"content": "<html/>", "file_name": "page.svg"})
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == ""
    assert data["content"] == ""
    assert "Unsupported root element" in data["error"]


def test_convert_file_name_is_not_a_path():
    response = client.post("/api/convert", json={"content": "/etc/passwd", "file_name": "x.svg"})
    assert response.status_code == 200
    assert "Malformed XML" in response.json()["error"]


def test_convert_rejects_unknown_option():
    response = client.post(
        "/api/convert",
        json={"content": CIRCLE_SVG, "file_name": "circle.svg", "config": {"colour": "red"}},
    )
    assert response.status_code == 422


def test_batch_isolates_failures():
    response = client.post(
        "/api/convert/batch",
        json={
            "icons": [
                {"content": CIRCLE_SVG, "file_name": "circle.svg"},
                {"content": '<svg viewBox="0 0 24 24"><path d="M0 0 Q1"/></svg>', "file_name": "bad.svg"},
                {"content": SIMPLE_VECTOR_XML, "file_name": "triangle.xml", "icon_name": "Delta"},
            ]
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["converted"] == 2
    assert data["failed"] == 1
    names = [r["name"] for r in data["results"]]
    assert names == ["Circle", "", "Delta"]
    bad = data["results"][1]
    assert bad["broken"] is True
    assert bad["file_name"] == "bad.svg"
    assert "Expected a number" in bad["error"]
