"""
/**
 * @file deepl_gateway/models/__init__.py
 * @description 数据模型导出。
 */
"""

from .glossary_model import (
    Glossary,
    GlossaryCreatePayload,
    GlossaryCreateRequest,
    GlossaryListResponse,
)
from .translate_request_model import TranslateRequest, Translation, TranslationPayload, TranslationResponse

__all__ = [
    "Glossary",
    "GlossaryCreatePayload",
    "GlossaryCreateRequest",
    "GlossaryListResponse",
    "TranslateRequest",
    "Translation",
    "TranslationPayload",
    "TranslationResponse",
]
