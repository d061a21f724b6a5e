"""
/**
 * @file deepl_gateway/services/translation_service.py
 * @description 翻译与术语表业务服务（基于 DeepLClient）。
 */
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from deepl_gateway.models import Glossary, Translation
from deepl_gateway.services.deepl_client_service import DeepLClient


@contextmanager
def _client_scope(client: Optional[DeepLClient]) -> Iterator[DeepLClient]:
    # a caller-provided client stays open, a settings-built one is closed here
    if client is not None:
        yield client
        return
    with DeepLClient.from_settings() as h:
        yield h


def translate_texts(
    texts: Sequence[str],
    source_lang: str,
    target_lang: str,
    glossary_id: str = "",
    client: Optional[DeepLClient] = None,
) -> List[Translation]:
    if not texts:
        return []
    with _client_scope(client) as h:
        return h.translate(list(texts), source_lang, target_lang, glossary_id)


def list_glossaries(client: Optional[DeepLClient] = None) -> List[Glossary]:
    with _client_scope(client) as h:
        return h.list_glossary_records()


def list_glossaries_raw(client: Optional[DeepLClient] = None) -> str:
    with _client_scope(client) as h:
        return h.list_glossaries()


def create_glossary_from_text(
    name: str,
    source_lang: str,
    target_lang: str,
    entries: str,
    client: Optional[DeepLClient] = None,
) -> Glossary:
    with _client_scope(client) as h:
        return h.create_glossary(name, source_lang, target_lang, io.StringIO(entries))
