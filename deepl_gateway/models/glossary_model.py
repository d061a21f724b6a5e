"""
/**
 * @file deepl_gateway/models/glossary_model.py
 * @description 术语表（Glossary）请求与响应模型（Pydantic）。
 */
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


ENTRIES_FORMAT_TSV = "tsv"


class Glossary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="glossary_id")
    name: str
    ready: bool
    source_lang: str
    target_lang: str
    # opaque timestamp, kept as the service sends it
    creation_time: str
    entry_count: int

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class GlossaryListResponse(BaseModel):
    glossaries: List[Glossary] = Field(default_factory=list)


class GlossaryCreatePayload(BaseModel):
    name: str
    source_lang: str
    target_lang: str
    entries_format: str = ENTRIES_FORMAT_TSV
    entries: str


class GlossaryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    source_lang: str = Field(..., min_length=1)
    target_lang: str = Field(..., min_length=1)
    entries: str
