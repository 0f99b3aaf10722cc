# librestock/routers/health.py

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from librestock.core.rate_limiter import limiter
from librestock.database import get_db
from librestock.schemas.health import HealthResponse
from librestock.services import health as health_service

router = APIRouter(
    prefix="/health-check",
    tags=["Health"],
)


def _respond(result: HealthResponse) -> JSONResponse:
    status_code = 200 if result.status == "ok" else 503
    return JSONResponse(status_code=status_code, content=result.model_dump(exclude_none=True))


@router.get("", response_model=HealthResponse)
@limiter.exempt
def health_check(request: Request, db: Session = Depends(get_db)):
    return _respond(
        health_service.aggregate(
            {
                "database": health_service.check_database(db),
                "better-auth": health_service.check_auth_config(),
            }
        )
    )


@router.get("/live")
@limiter.exempt
def liveness(request: Request):
    return {"status": "ok"}


@router.get("/ready", response_model=HealthResponse)
@limiter.exempt
def readiness(request: Request, db: Session = Depends(get_db)):
    return _respond(
        health_service.aggregate({"database": health_service.check_database(db)})
    )
