"""
/**
 * @file deepl_gateway/__init__.py
 * @description DeepL 翻译 / 术语表客户端与 HTTP 网关。
 */
"""

from .services import DeepLClient

__all__ = ["DeepLClient"]

__version__ = "0.1.0"
