"""
/**
 * @file deepl_gateway/controllers/translate_controller.py
 * @description 翻译控制器。
 */
"""

from fastapi import APIRouter

from deepl_gateway.controllers.error_mapping import to_http_exception
from deepl_gateway.models import TranslateRequest
from deepl_gateway.services import DeepLClientError, translate_texts


router = APIRouter()


@router.post("/api/translate")
def translate(req: TranslateRequest):
    try:
        translations = translate_texts(
            req.texts,
            req.source_lang,
            req.target_lang,
            glossary_id=req.glossary_id,
        )
    except DeepLClientError as e:
        raise to_http_exception(e) from e
    return {"status": "success", "translations": [t.model_dump() for t in translations]}
