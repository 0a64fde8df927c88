"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    dialects: list[str] = Field(default_factory=list)


class ConvertResponse(BaseModel):
    name: str
    content: str
    icon_type: str | None = None
    error: str | None = None


class BatchConvertResult(BaseModel):
    file_name: str
    name: str = ""
    content: str = ""
    icon_type: str | None = None
    broken: bool = False
    error: str | None = None


class BatchConvertResponse(BaseModel):
    results: list[BatchConvertResult] = Field(default_factory=list)
    converted: int = 0
    failed: int = 0
