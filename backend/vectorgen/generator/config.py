"""Generator configuration and output models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class OutputFormat(str, enum.Enum):
    BackingProperty = "BackingProperty"
    LazyProperty = "LazyProperty"


class ImageVectorGeneratorConfig(BaseModel):
    """Every option the generator understands; anything else is rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    package_name: str
    icon_pack_package: str = ""
    pack_name: str = ""
    nested_pack_name: str = ""
    output_format: OutputFormat = OutputFormat.BackingProperty
    generate_preview: bool = False
    use_flat_package: bool = False
    use_explicit_mode: bool = False
    add_trailing_comma: bool = False


class ImageVectorSpecOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    content: str

    @classmethod
    def empty(cls) -> ImageVectorSpecOutput:
        """Placeholder result for a failed conversion."""
        return cls(name="", content="")
