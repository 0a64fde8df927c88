"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from vectorgen.generator.config import OutputFormat


class GeneratorOptions(BaseModel):
    """Per-request overrides of the generator defaults in Settings."""

    model_config = ConfigDict(extra="forbid")

    package_name: str | None = None
    icon_pack_package: str | None = None
    pack_name: str | None = None
    nested_pack_name: str = ""
    output_format: OutputFormat | None = None
    generate_preview: bool | None = None
    use_flat_package: bool | None = None
    use_explicit_mode: bool | None = None
    add_trailing_comma: bool | None = None


class ConvertRequest(BaseModel):
    content: str = Field(..., description="Raw SVG or vector drawable XML")
    file_name: str = Field(..., description="Source file name, e.g. ic_home.svg")
    icon_name: str | None = Field(default=None, description="Overrides the name derived from file_name")
    config: GeneratorOptions | None = None


class IconSource(BaseModel):
    content: str
    file_name: str
    icon_name: str | None = None


class BatchConvertRequest(BaseModel):
    icons: list[IconSource] = Field(..., description="Icons to convert independently")
    config: GeneratorOptions | None = None
