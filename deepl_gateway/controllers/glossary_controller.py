"""
/**
 * @file deepl_gateway/controllers/glossary_controller.py
 * @description 术语表控制器：列表 / 创建。
 */
"""

from fastapi import APIRouter

from deepl_gateway.controllers.error_mapping import to_http_exception
from deepl_gateway.models import GlossaryCreateRequest
from deepl_gateway.services import (
    DeepLClientError,
    create_glossary_from_text,
    list_glossaries,
    list_glossaries_raw,
)


router = APIRouter()


@router.get("/api/glossaries")
def get_glossaries():
    try:
        glossaries = list_glossaries()
    except DeepLClientError as e:
        raise to_http_exception(e) from e
    return {"status": "success", "glossaries": [g.to_wire() for g in glossaries]}


@router.get("/api/glossaries/raw")
def get_glossaries_raw():
    try:
        body = list_glossaries_raw()
    except DeepLClientError as e:
        raise to_http_exception(e) from e
    return {"status": "success", "body": body}


@router.post("/api/glossaries")
def create_glossary(req: GlossaryCreateRequest):
    try:
        glossary = create_glossary_from_text(req.name, req.source_lang, req.target_lang, req.entries)
    except DeepLClientError as e:
        raise to_http_exception(e) from e
    return {"status": "success", "glossary": glossary.to_wire()}
