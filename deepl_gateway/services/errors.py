"""
/**
 * @file deepl_gateway/services/errors.py
 * @description DeepL 客户端异常类型。
 */
"""

from __future__ import annotations

from typing import Optional


class DeepLClientError(Exception):
    """Base class for every failure raised by DeepLClient."""


class ConfigError(DeepLClientError):
    """Invalid construction arguments or missing configuration."""


class EncodingError(DeepLClientError):
    """The request body could not be serialized."""


class EntriesReadError(DeepLClientError, OSError):
    """The glossary entries stream could not be fully read."""


class TransportError(DeepLClientError):
    """The HTTP exchange could not be completed."""


class DecodingError(DeepLClientError):
    """The response body does not match the expected shape."""


class ApiError(DeepLClientError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body or ""
        message = f"HTTP {status_code}"
        if self.body:
            message = f"{message}: {self.body[:200]}"
        super().__init__(message)
