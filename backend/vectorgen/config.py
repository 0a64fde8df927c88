"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

from vectorgen.generator.config import ImageVectorGeneratorConfig, OutputFormat

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    vectorgen_env: str = "development"
    vectorgen_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Generator defaults
    package_name: str = "com.example.icons"
    icon_pack_package: str = "com.example.icons"
    icon_pack_name: str = "AppIcons"
    nested_packs: list[str] = []
    output_format: OutputFormat = OutputFormat.BackingProperty
    generate_preview: bool = False
    flat_package: bool = False
    use_explicit_mode: bool = False
    add_trailing_comma: bool = False

    # Export
    icon_pack_destination: str = "build/icons"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def generator_config(
        self,
        nested_pack_name: str = "",
        package_name: str | None = None,
    ) -> ImageVectorGeneratorConfig:
        return ImageVectorGeneratorConfig(
            package_name=self.package_name if package_name is None else package_name,
            icon_pack_package=self.icon_pack_package,
            pack_name=self.icon_pack_name,
            nested_pack_name=nested_pack_name,
            output_format=self.output_format,
            generate_preview=self.generate_preview,
            use_flat_package=self.flat_package,
            use_explicit_mode=self.use_explicit_mode,
            add_trailing_comma=self.add_trailing_comma,
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


settings = Settings()
