from __future__ import annotations
"""server/portfolio_cms/api/v1/endpoints/health.py
~~~~~~~~~~~~~~~~~~~~~~~~
Health check (public) : process + base de données joignable.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio_cms.infrastructure.persistence.database.session import get_db

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/health")
def health(db: Session = Depends(get_db)) -> dict[str, str]:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("health: database unreachable: %s", exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="database_unavailable")
    return {"status": "ok", "database": "ok"}
