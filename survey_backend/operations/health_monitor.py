# survey_backend/operations/health_monitor.py

# Liveness/readiness check: is the database reachable?

import logging
from typing import Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def check_database(db) -> Dict:
    try:
        db.session.execute(text("SELECT 1"))
        return {"ok": True}
    except SQLAlchemyError as e:
        logger.error("Database health check failed: %s", e)
        db.session.rollback()
        return {"ok": False}


def check_health(db) -> Dict:
    """Aggregate overall service health."""
    database = check_database(db)
    return {
        "status": "ok" if database["ok"] else "error",
        "database": "ok" if database["ok"] else "error",
    }
