"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from vectorgen.config import Settings
from vectorgen.generator import ImageVectorGeneratorConfig, OutputFormat

RESOURCES = Path(__file__).parent / "resources"

PACKAGE = "io.github.composegears.valkyrie.icons"
PACK_NAME = "ValkyrieIcons"


# Sample documents

LINEAR_GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <defs>
    <linearGradient id="gradient" x1="0" y1="0" x2="24" y2="24" gradientUnits="userSpaceOnUse">
      <stop offset="0" stop-color="#D9D9D9"/>
      <stop offset="0.5" stop-color="#9E9E9E"/>
      <stop offset="1" stop-color="#737373"/>
    </linearGradient>
  </defs>
  <path fill="url(#gradient)" d="M0,0h24v24H0z"/>
</svg>'''

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <g>
    <circle cx="8" cy="9" r="1"/>
    <circle cx="16" cy="9" r="1"/>
  </g>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

SIMPLE_VECTOR_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp"
    android:viewportWidth="24"
    android:viewportHeight="24">
  <path
      android:fillColor="#FF000000"
      android:pathData="M12,2L2,22h20z"/>
</vector>'''


@pytest.fixture
def resources() -> Path:
    return RESOURCES


@pytest.fixture
def backing_config() -> ImageVectorGeneratorConfig:
    return ImageVectorGeneratorConfig(
        package_name=PACKAGE,
        icon_pack_package=PACKAGE,
        pack_name=PACK_NAME,
        output_format=OutputFormat.BackingProperty,
    )


@pytest.fixture
def lazy_config(backing_config: ImageVectorGeneratorConfig) -> ImageVectorGeneratorConfig:
    return backing_config.model_copy(update={"output_format": OutputFormat.LazyProperty})


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        package_name=PACKAGE,
        icon_pack_package=PACKAGE,
        icon_pack_name=PACK_NAME,
        icon_pack_destination=str(tmp_path / "out"),
        _env_file=None,
    )
