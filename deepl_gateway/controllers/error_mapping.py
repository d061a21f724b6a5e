"""
/**
 * @file deepl_gateway/controllers/error_mapping.py
 * @description 将 DeepLClient 异常映射为 HTTPException。
 */
"""

from __future__ import annotations

import logging

from fastapi import HTTPException

from deepl_gateway.services.errors import (
    ApiError,
    ConfigError,
    DecodingError,
    DeepLClientError,
    EncodingError,
    EntriesReadError,
    TransportError,
)

logger = logging.getLogger(__name__)


def to_http_exception(exc: DeepLClientError) -> HTTPException:
    detail = {"status": "error", "message": str(exc)}
    if isinstance(exc, ApiError):
        code = exc.status_code
        # Ensure code is a valid HTTP status code
        status_code = code if isinstance(code, int) and 100 <= code <= 599 else 500
        detail["code"] = code
    elif isinstance(exc, ConfigError):
        status_code = 500
    elif isinstance(exc, (EncodingError, EntriesReadError)):
        status_code = 400
    elif isinstance(exc, (TransportError, DecodingError)):
        status_code = 502
    else:
        status_code = 500
    logger.warning(f"Upstream call failed ({type(exc).__name__}): {exc}")
    return HTTPException(status_code=status_code, detail=detail)
