"""
/**
 * @file deepl_gateway/config/settings.py
 * @description 配置加载与合并（config.json + config.local.json + 环境变量）。
 */
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional


REPO_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
CONFIG_PATH = os.path.join(REPO_ROOT, "config.json")
CONFIG_LOCAL_PATH = os.path.join(REPO_ROOT, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(REPO_ROOT, "config.example.json")

DEFAULT_BASE_URL = "https://api-free.deepl.com/v2"
DEFAULT_MAX_ENTRIES_BYTES = 10 * 1024 * 1024

logger = logging.getLogger(__name__)


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    @property
    def deepl(self) -> Dict[str, Any]:
        value = self.raw.get("deepl", {})
        return value if isinstance(value, dict) else {}

    @property
    def api_keys(self) -> Dict[str, str]:
        value = self.raw.get("api_keys", {})
        return value if isinstance(value, dict) else {}

    @property
    def limits(self) -> Dict[str, Any]:
        value = self.raw.get("limits", {})
        return value if isinstance(value, dict) else {}

    @property
    def base_url(self) -> str:
        env_value = os.getenv("DEEPL_BASE_URL")
        if env_value:
            return env_value.strip()
        value = self.deepl.get("base_url")
        if isinstance(value, str) and value.strip():
            return value.strip()
        return DEFAULT_BASE_URL

    @property
    def timeout(self) -> Optional[float]:
        value = self.deepl.get("timeout")
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
            return float(value)
        return None

    @property
    def max_entries_bytes(self) -> Optional[int]:
        limits = self.limits
        if "max_glossary_entries_bytes" not in limits:
            return DEFAULT_MAX_ENTRIES_BYTES
        value = limits.get("max_glossary_entries_bytes")
        # null in the config file disables the bound
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid limits.max_glossary_entries_bytes={value!r}, using default")
            return DEFAULT_MAX_ENTRIES_BYTES

    def resolve_deepl_key(self) -> Optional[str]:
        return (
            os.getenv("DEEPL_AUTH_KEY")
            or os.getenv("DEEPL_API_KEY")
            or (self.api_keys.get("deepl") if isinstance(self.api_keys.get("deepl"), str) else None)
        )


_CACHED_SETTINGS: Optional[Settings] = None
_CONFIG_HASH = ""
_SETTINGS_LOCK = threading.Lock()


def _deep_diff(d1: Dict[str, Any], d2: Dict[str, Any], path="") -> list:
    diffs = []
    for k in set(d1.keys()) | set(d2.keys()):
        p = f"{path}.{k}" if path else k
        if k not in d1:
            diffs.append(f"Added: {p}")
        elif k not in d2:
            diffs.append(f"Removed: {p}")
        elif isinstance(d1[k], dict) and isinstance(d2[k], dict):
            diffs.extend(_deep_diff(d1[k], d2[k], p))
        elif d1[k] != d2[k]:
            # values may hold secrets, only the key path is logged
            diffs.append(f"Changed: {p}")
    return diffs


def reload_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    global _CACHED_SETTINGS, _CONFIG_HASH

    with _SETTINGS_LOCK:
        try:
            base_cfg = _load_json(base_path)
            if not base_cfg.get("deepl") and os.path.exists(example_path):
                base_cfg = _merge_dicts(_load_json(example_path), base_cfg)

            local_cfg = _load_json(local_path)
            merged = _merge_dicts(base_cfg, local_cfg)

            # Sort keys to ensure consistent hash for same content
            new_hash = hashlib.md5(json.dumps(merged, sort_keys=True).encode("utf-8")).hexdigest()

            if _CACHED_SETTINGS is not None and new_hash == _CONFIG_HASH:
                return _CACHED_SETTINGS

            is_reload = _CACHED_SETTINGS is not None
            if is_reload:
                diffs = _deep_diff(_CACHED_SETTINGS.raw, merged)
                if diffs:
                    logger.info(f"Config changes detected: {'; '.join(diffs)}")

            _CACHED_SETTINGS = Settings(raw=merged)
            _CONFIG_HASH = new_hash

            if is_reload:
                logger.info("Configuration reloaded successfully.")

        except (OSError, ValueError) as e:
            logger.error(f"Failed to reload config: {e}. Keeping old config.")
            if _CACHED_SETTINGS is None:
                logger.warning("Initializing with empty settings due to load failure.")
                _CACHED_SETTINGS = Settings(raw={})

    return _CACHED_SETTINGS


def load_settings(
    base_path: Optional[str] = None,
    local_path: Optional[str] = None,
    example_path: Optional[str] = None,
) -> Settings:
    """
    Get current settings. Lazy loads on first call.
    Passing explicit paths always re-reads those files.
    """
    if base_path or local_path or example_path:
        return reload_settings(
            base_path=base_path or CONFIG_PATH,
            local_path=local_path or CONFIG_LOCAL_PATH,
            example_path=example_path or CONFIG_EXAMPLE_PATH,
        )
    if _CACHED_SETTINGS is None:
        return reload_settings()
    return _CACHED_SETTINGS
