"""
/**
 * @file deepl_gateway/utils/tsv_utils.py
 * @description 术语表 TSV 条目读取与规范化。
 */
"""

from __future__ import annotations

from typing import IO, List, Optional, Tuple, Union

_READ_CHUNK = 64 * 1024


class EntriesTooLargeError(ValueError):
    def __init__(self, limit: int):
        super().__init__(f"Glossary entries exceed {limit} bytes")
        self.limit = limit


def normalize_newlines(text: str) -> str:
    """Collapse every CRLF pair to LF. Lone CR characters are left untouched."""
    return text.replace("\r\n", "\n")


def read_entries(stream: IO[Union[str, bytes]], max_bytes: Optional[int] = None) -> str:
    """
    Drain `stream` into a string.

    Binary streams are decoded as UTF-8. When `max_bytes` is set the read
    stops with EntriesTooLargeError once the content grows past it; for text
    streams the limit is applied to the UTF-8 encoded size.
    """
    parts: List[str] = []
    raw: List[bytes] = []
    size = 0
    while True:
        chunk = stream.read(_READ_CHUNK)
        if not chunk:
            break
        if isinstance(chunk, bytes):
            raw.append(chunk)
            size += len(chunk)
        else:
            parts.append(chunk)
            size += len(chunk.encode("utf-8"))
        if max_bytes is not None and size > max_bytes:
            raise EntriesTooLargeError(max_bytes)
    if raw:
        return b"".join(raw).decode("utf-8")
    return "".join(parts)


def parse_entries(text: str) -> List[Tuple[str, str]]:
    """Split normalized TSV content into (source, target) pairs, skipping blank lines."""
    pairs: List[Tuple[str, str]] = []
    for lineno, line in enumerate(normalize_newlines(text).split("\n"), 1):
        if not line.strip():
            continue
        fields = line.split("\t")
        if len(fields) != 2:
            raise ValueError(f"Line {lineno}: expected 2 tab-separated fields, got {len(fields)}")
        pairs.append((fields[0], fields[1]))
    return pairs
