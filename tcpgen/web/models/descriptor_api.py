"""Pydantic response models for the descriptor JSON API."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from tcpgen.generator import Catalog, Descriptor, asset_filename


class TypePairModel(BaseModel):
    category: str = Field(..., description="Category display name (or raw label for ad-hoc descriptors)")
    item: str

    model_config = ConfigDict(extra='forbid')


class TieredNameModel(BaseModel):
    name: str
    tier: Optional[str] = Field(None, description="Minor | Intermediate | Major; absent for ad-hoc entries")

    model_config = ConfigDict(extra='forbid')


class DescriptorModel(BaseModel):
    types: List[TypePairModel]
    conditions: List[str] = Field(default_factory=list)
    modifiers: List[TieredNameModel] = Field(default_factory=list)
    anomalies: List[TieredNameModel] = Field(default_factory=list)
    designer: bool = False
    text: str = Field(..., description="Console rendering of the descriptor")
    filename: str = Field(..., description="Canonical base-image filename")

    @classmethod
    def from_descriptor(cls, descriptor: Descriptor) -> "DescriptorModel":
        return cls(
            types=[TypePairModel(category=p.label, item=p.item) for p in descriptor.type_pairs],
            conditions=list(descriptor.conditions),
            modifiers=[TieredNameModel(name=m.name, tier=m.tier.value if m.tier else None) for m in descriptor.modifiers],
            anomalies=[TieredNameModel(name=a.name, tier=a.tier.value if a.tier else None) for a in descriptor.anomalies],
            designer=descriptor.designer,
            text=descriptor.render_text(),
            filename=asset_filename(descriptor),
        )


class DescriptorBatch(BaseModel):
    count: int
    descriptors: List[DescriptorModel]


class CatalogInfo(BaseModel):
    types: Dict[str, List[str]]
    conditions: List[str]
    modifiers: List[str]
    anomalies: List[str]
    type_count: int
    unknown_count: int

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "CatalogInfo":
        data = catalog.to_dict()
        return cls(
            **data,
            type_count=catalog.type_count(),
            unknown_count=catalog.unknown_count(),
        )


__all__ = ["TypePairModel", "TieredNameModel", "DescriptorModel", "DescriptorBatch", "CatalogInfo"]
