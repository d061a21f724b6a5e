"""
/**
 * @file deepl_gateway/controllers/health_controller.py
 * @description 健康检查控制器。
 */
"""

from fastapi import APIRouter


router = APIRouter()


@router.get("/health")
def health():
    from deepl_gateway.config import load_settings
    from deepl_gateway.utils import is_valid_base_url

    settings = load_settings()

    checks = {
        "api_key": bool(settings.resolve_deepl_key()),
        "base_url": is_valid_base_url(settings.base_url),
    }

    return {
        "status": "ok" if all(checks.values()) else "degraded",
        "checks": checks,
    }
