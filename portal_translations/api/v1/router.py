"""
API Router configuration
"""

from fastapi import APIRouter

from portal_translations.api.v1 import (
    health,
    preferences,
    queue,
    translations,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(translations.router)
api_router.include_router(queue.router)
api_router.include_router(preferences.router)
