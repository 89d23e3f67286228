from __future__ import annotations

import logging

from app.db.session import get_db
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/management", tags=["management"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Liveness plus a database round-trip. Public, no auth."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("health check: database unreachable")
        return JSONResponse(
            status_code=503,
            content={"status": "DOWN", "components": {"db": {"status": "DOWN"}}},
        )
    return {"status": "UP", "components": {"db": {"status": "UP"}}}
