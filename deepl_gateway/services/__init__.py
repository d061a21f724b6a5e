"""
/**
 * @file deepl_gateway/services/__init__.py
 * @description 业务服务层导出。
 */
"""

from .deepl_client_service import DeepLClient
from .errors import (
    ApiError,
    ConfigError,
    DecodingError,
    DeepLClientError,
    EncodingError,
    EntriesReadError,
    TransportError,
)
from .translation_service import create_glossary_from_text, list_glossaries, list_glossaries_raw, translate_texts

__all__ = [
    "DeepLClient",
    "ApiError",
    "ConfigError",
    "DecodingError",
    "DeepLClientError",
    "EncodingError",
    "EntriesReadError",
    "TransportError",
    "create_glossary_from_text",
    "list_glossaries",
    "list_glossaries_raw",
    "translate_texts",
]
