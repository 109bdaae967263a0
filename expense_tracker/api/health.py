"""
Health check endpoint.

Reports whether the process is up and whether the database
answers a trivial query. No authentication required.
"""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from expense_tracker.api.deps import get_app_settings
from expense_tracker.config import Settings
from expense_tracker.models.base import get_db

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError:
        logger.exception("health_database_unreachable")
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "service": "expense-tracker",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": db_status,
    }
