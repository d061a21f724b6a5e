"""
/**
 * @file deepl_gateway/main.py
 * @description FastAPI 应用入口（仅装配路由与中间件）。
 */
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deepl_gateway.config import load_settings
from deepl_gateway.controllers import config_router, glossary_router, health_router, translate_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI()


@app.on_event("startup")
async def startup_event():
    # Initial load
    settings = load_settings()
    logger.info(f"DeepL gateway targeting {settings.base_url}")


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(translate_router)
app.include_router(glossary_router)
app.include_router(config_router)
