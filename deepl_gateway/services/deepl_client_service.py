"""
/**
 * @file deepl_gateway/services/deepl_client_service.py
 * @description DeepL HTTP 调用封装：翻译 / 术语表列表 / 创建术语表。
 */
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError

from deepl_gateway.config import Settings, load_settings
from deepl_gateway.config.settings import DEFAULT_MAX_ENTRIES_BYTES
from deepl_gateway.models import (
    Glossary,
    GlossaryCreatePayload,
    GlossaryListResponse,
    Translation,
    TranslationPayload,
    TranslationResponse,
)
from deepl_gateway.services.errors import (
    ApiError,
    ConfigError,
    DecodingError,
    EncodingError,
    EntriesReadError,
    TransportError,
)
from deepl_gateway.utils import EntriesTooLargeError, normalize_newlines, read_entries

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


class DeepLClient:
    """
    Synchronous client for the DeepL REST API.

    The base URL and API key are fixed at construction. A single
    requests.Session is reused for every call; pass one in to share a
    connection pool, otherwise the client creates its own and closes it in
    close().
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        max_entries_bytes: Optional[int] = DEFAULT_MAX_ENTRIES_BYTES,
    ):
        if not base_url:
            raise ConfigError("base_url is required")
        if base_url.endswith("/"):
            raise ConfigError("base_url must not end with a slash")
        self._base_url = base_url
        self._api_key = api_key
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._timeout = timeout
        self._max_entries_bytes = max_entries_bytes

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, session: Optional[requests.Session] = None
    ) -> "DeepLClient":
        s = settings or load_settings()
        api_key = s.resolve_deepl_key()
        if not api_key:
            raise ConfigError("Missing API key. Set DEEPL_AUTH_KEY or api_keys.deepl in config.local.json")
        return cls(
            s.base_url,
            api_key,
            session=session,
            timeout=s.timeout,
            max_entries_bytes=s.max_entries_bytes,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str:
        return self._api_key

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "DeepLClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -------------------- public API --------------------
    def translate(
        self,
        texts: Sequence[str],
        source_lang: str,
        target_lang: str,
        glossary_id: str = "",
    ) -> List[Translation]:
        """Translate `texts` into `target_lang`; results keep the input order."""
        body = self._encode(
            TranslationPayload,
            text=texts,
            target_lang=target_lang,
            source_lang=source_lang,
            glossary_id=glossary_id,
        )
        data = self._request_json("POST", "/translate", body)
        return self._decode(TranslationResponse, data).translations

    def list_glossaries(self) -> str:
        """Return the raw body of GET /glossaries."""
        with self._send("GET", "/glossaries") as response:
            self._check_status(response, "GET", "/glossaries")
            try:
                return response.text
            except requests.RequestException as exc:
                raise TransportError(str(exc)) from exc

    def list_glossary_records(self) -> List[Glossary]:
        data = self._request_json("GET", "/glossaries")
        return self._decode(GlossaryListResponse, data).glossaries

    def create_glossary(
        self,
        name: str,
        source_lang: str,
        target_lang: str,
        entries: IO[Union[str, bytes]],
    ) -> Glossary:
        """
        Create a glossary from a stream of TSV lines (source<TAB>target).

        The stream is drained into memory before the request is built, and
        CRLF line endings are collapsed to LF.
        """
        try:
            content = read_entries(entries, self._max_entries_bytes)
        except EntriesTooLargeError as exc:
            raise EntriesReadError(str(exc)) from exc
        except (OSError, ValueError) as exc:
            # ValueError covers closed streams and invalid UTF-8
            raise EntriesReadError(f"Failed to read glossary entries: {exc}") from exc

        body = self._encode(
            GlossaryCreatePayload,
            name=name,
            source_lang=source_lang,
            target_lang=target_lang,
            entries=normalize_newlines(content),
        )
        data = self._request_json("POST", "/glossaries", body, log_status=True)
        return self._decode(Glossary, data)

    # -------------------- internals --------------------
    def _get_headers(self, with_body: bool = False) -> Dict[str, str]:
        headers = {"Authorization": f"DeepL-Auth-Key {self._api_key}"}
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _encode(self, model: Type[BaseModel], **fields: Any) -> bytes:
        try:
            payload = model(**fields).model_dump()
            return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        except (ValidationError, TypeError, ValueError) as exc:
            raise EncodingError(f"Failed to encode {model.__name__}: {exc}") from exc

    def _send(self, method: str, path: str, body: Optional[bytes] = None) -> requests.Response:
        url = f"{self._base_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            return self._session.request(
                method,
                url,
                data=body,
                headers=self._get_headers(with_body=body is not None),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning(f"{method} {url} failed: {exc}")
            raise TransportError(str(exc)) from exc

    def _request_json(self, method: str, path: str, body: Optional[bytes] = None, log_status: bool = False) -> Any:
        with self._send(method, path, body) as response:
            if log_status:
                logger.info(f"Response: {response.status_code} {response.reason or ''}".rstrip())
            self._check_status(response, method, path)
            try:
                return response.json()
            except ValueError as exc:
                raise DecodingError(f"Response from {path} is not valid JSON: {exc}") from exc
            except requests.RequestException as exc:
                # body read can still fail after the headers arrived
                raise TransportError(str(exc)) from exc

    @staticmethod
    def _check_status(response: requests.Response, method: str, path: str) -> None:
        if 200 <= response.status_code < 300:
            return
        logger.warning(f"{method} {path} returned HTTP {response.status_code}")
        raise ApiError(response.status_code, response.text)

    @staticmethod
    def _decode(model: Type[_M], data: Any) -> _M:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise DecodingError(f"Unexpected {model.__name__} shape: {exc}") from exc
