"""POST /api/convert: SVG or vector drawable to Kotlin ImageVector."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends

from vectorgen.config import Settings
from vectorgen.dependencies import get_settings
from vectorgen.errors import ConversionError
from vectorgen.generator import ImageVectorGeneratorConfig, ImageVectorSpecOutput
from vectorgen.models.requests import BatchConvertRequest, ConvertRequest, GeneratorOptions
from vectorgen.models.responses import BatchConvertResponse, BatchConvertResult, ConvertResponse
from vectorgen.pipeline import ConversionResult, convert

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/convert")


def generator_config(options: GeneratorOptions | None, settings: Settings) -> ImageVectorGeneratorConfig:
    """Settings defaults overlaid with whatever the request sets explicitly."""
    base = settings.generator_config()
    if options is None:
        return base
    overrides = options.model_dump(exclude_none=True)
    return base.model_copy(update=overrides)


def _convert(content: str, file_name: str, icon_name: str | None, config: ImageVectorGeneratorConfig) -> ConversionResult:
    # Always bytes: a string source could be mistaken for a file path.
    return convert(content.encode("utf-8"), config, file_name=file_name, icon_name=icon_name)


@router.post("", response_model=ConvertResponse)
async def convert_icon(
    req: ConvertRequest,
    settings: Settings = Depends(get_settings),
) -> ConvertResponse:
    config = generator_config(req.config, settings)
    loop = asyncio.get_running_loop()
    try:
        result = await loop.run_in_executor(None, _convert, req.content, req.file_name, req.icon_name, config)
    except ConversionError as e:
        logger.warning("Conversion of %s failed: %s", req.file_name, e)
        empty = ImageVectorSpecOutput.empty()
        return ConvertResponse(name=empty.name, content=empty.content, error=str(e))

    return ConvertResponse(
        name=result.output.name,
        content=result.output.content,
        icon_type=result.icon_type.value,
    )


@router.post("/batch", response_model=BatchConvertResponse)
async def convert_batch(
    req: BatchConvertRequest,
    settings: Settings = Depends(get_settings),
) -> BatchConvertResponse:
    config = generator_config(req.config, settings)
    loop = asyncio.get_running_loop()

    async def _one(content: str, file_name: str, icon_name: str | None) -> BatchConvertResult:
        try:
            result = await loop.run_in_executor(None, _convert, content, file_name, icon_name, config)
        except ConversionError as e:
            logger.warning("Broken icon %s: %s", file_name, e)
            return BatchConvertResult(file_name=file_name, broken=True, error=str(e))
        return BatchConvertResult(
            file_name=file_name,
            name=result.output.name,
            content=result.output.content,
            icon_type=result.icon_type.value,
        )

    results = await asyncio.gather(
        *(_one(icon.content, icon.file_name, icon.icon_name) for icon in req.icons)
    )
    failed = sum(r.broken for r in results)
    logger.info("Batch converted %d icons (%d broken)", len(results) - failed, failed)
    return BatchConvertResponse(
        results=list(results),
        converted=len(results) - failed,
        failed=failed,
    )
