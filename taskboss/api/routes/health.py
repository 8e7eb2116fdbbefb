# taskboss/api/routes/health.py
from datetime import datetime, timezone
from typing import Any
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskboss import schemas
from taskboss.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=schemas.HealthStatus)
def health(db: Session = Depends(get_db)) -> Any:
    """
    Liveness check. `database` reports whether a trivial query succeeds.
    """
    try:
        db.execute(text("SELECT 1"))
        database = True
    except SQLAlchemyError as e:
        logger.error(f"Health check database query failed: {str(e)}")
        database = False

    return {
        "status": "ok",
        "database": database,
        "timestamp": datetime.now(timezone.utc),
    }
