"""
/**
 * @file deepl_gateway/utils/__init__.py
 * @description 工具函数导出。
 */
"""

from .tsv_utils import EntriesTooLargeError, normalize_newlines, parse_entries, read_entries
from .validators import is_valid_base_url, is_valid_url

__all__ = [
    "EntriesTooLargeError",
    "normalize_newlines",
    "parse_entries",
    "read_entries",
    "is_valid_base_url",
    "is_valid_url",
]
