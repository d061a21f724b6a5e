"""
/**
 * @file deepl_gateway/controllers/__init__.py
 * @description 控制器（路由）导出。
 */
"""

from .config_controller import router as config_router
from .glossary_controller import router as glossary_router
from .health_controller import router as health_router
from .translate_controller import router as translate_router

__all__ = [
    "config_router",
    "glossary_router",
    "health_router",
    "translate_router",
]
