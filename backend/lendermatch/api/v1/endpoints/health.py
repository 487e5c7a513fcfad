"""Liveness and lender catalog connectivity check."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from lendermatch.config import settings
from lendermatch.deps import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


async def _database_status(db: AsyncSession) -> str:
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning(f"Lender catalog database unreachable: {str(e)}")
        return f"unhealthy: {str(e)}"
    return "healthy"


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)) -> dict:
    """
    Report whether the API can reach the lender catalog.

    Matching still answers when the database is down (with no matches),
    so an unreachable database is reported as "degraded" rather than
    failing the check.

    Returns:
        dict: Overall status plus API and database status
    """
    database = await _database_status(db)
    return {
        "status": "healthy" if database == "healthy" else "degraded",
        "api": "healthy",
        "database": database,
        "environment": settings.ENVIRONMENT,
    }
