"""
Health check endpoint
"""

from fastapi import APIRouter
from sqlalchemy import text

from portal_translations.core.deps import SessionDep
from portal_translations.core.logging import get_logger
from portal_translations.core.time import to_utc_iso

logger = get_logger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check(db: SessionDep):
    result = {"api": "ok", "database": "ok", "time": to_utc_iso()}
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        result["database"] = "error"
    return result
