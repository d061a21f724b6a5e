"""
/**
 * @file deepl_gateway/models/translate_request_model.py
 * @description 翻译请求/响应模型（Pydantic）。
 */
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class Translation(BaseModel):
    detected_source_language: str
    text: str


class TranslationResponse(BaseModel):
    translations: List[Translation]


class TranslationPayload(BaseModel):
    # field order is the wire order
    text: List[str]
    target_lang: str
    source_lang: str = ""
    glossary_id: str = ""


class TranslateRequest(BaseModel):
    texts: List[str]
    source_lang: str = ""
    target_lang: str = Field(..., min_length=1)
    glossary_id: str = ""
