"""Back end: IR -> Kotlin ImageVector source."""

from vectorgen.generator.config import (
    ImageVectorGeneratorConfig,
    ImageVectorSpecOutput,
    OutputFormat,
)
from vectorgen.generator.image_vector import ImageVectorGenerator

__all__ = [
    "ImageVectorGenerator",
    "ImageVectorGeneratorConfig",
    "ImageVectorSpecOutput",
    "OutputFormat",
]
