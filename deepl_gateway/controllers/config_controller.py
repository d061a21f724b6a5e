from fastapi import APIRouter

from deepl_gateway.config.settings import reload_settings

router = APIRouter()


@router.post("/api/config/reload")
def force_reload():
    s = reload_settings()
    return {
        "status": "ok",
        "base_url": s.base_url,
        "api_key_configured": bool(s.resolve_deepl_key()),
    }
