"""Icon pack grouping models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class IconPackSingle(BaseModel):
    """All icons live directly in the pack object."""

    kind: Literal["single"] = "single"
    icon_pack_name: str
    icon_package: str


class IconPackNested(BaseModel):
    """Icons are spread over nested pack objects (``Pack.Filled``, ``Pack.Outlined``)."""

    kind: Literal["nested"] = "nested"
    icon_pack_name: str
    icon_package: str
    nested_packs: list[str] = Field(default_factory=list)
    current_nested_pack: str

    @property
    def nested_package(self) -> str:
        return self.current_nested_pack.lower()


IconPack = IconPackSingle | IconPackNested
