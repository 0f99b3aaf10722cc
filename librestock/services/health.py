# librestock/services/health.py

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from librestock.core.config import settings
from librestock.schemas.health import HealthIndicator, HealthResponse

logger = logging.getLogger("librestock")


def check_database(db: Session) -> HealthIndicator:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {str(e)}")
        return HealthIndicator(status="down", message="Database unreachable")

    return HealthIndicator(status="up")


def check_auth_config() -> HealthIndicator:
    if not settings.BETTER_AUTH_SECRET:
        return HealthIndicator(status="down", message="BETTER_AUTH_SECRET is not configured")

    return HealthIndicator(status="up", message="Better Auth is properly configured")


def aggregate(indicators: dict[str, HealthIndicator]) -> HealthResponse:
    info = {name: result for name, result in indicators.items() if result.status == "up"}
    error = {name: result for name, result in indicators.items() if result.status == "down"}

    return HealthResponse(
        status="error" if error else "ok",
        info=info,
        error=error,
    )
