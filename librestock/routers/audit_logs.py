# librestock/routers/audit_logs.py

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from librestock.core.auth import get_current_user
from librestock.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page
from librestock.database import get_db
from librestock.models.enums import AuditAction
from librestock.schemas.audit_log import AuditLogResponse
from librestock.services import audit_logs as audit_service

# Read-only: audit entries are only ever written by the services
router = APIRouter(
    prefix="/audit-logs",
    tags=["Audit Logs"],
)


@router.get("", response_model=Page[AuditLogResponse])
def list_audit_logs(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    entity_type: str | None = None,
    entity_id: UUID | None = None,
    user_id: str | None = None,
    action: AuditAction | None = None,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return audit_service.list_logs(
        db,
        page,
        limit,
        entity_type=entity_type,
        entity_id=entity_id,
        user_id=user_id,
        action=action,
        from_date=from_date,
        to_date=to_date,
    )


@router.get("/entity/{entity_type}/{entity_id}", response_model=list[AuditLogResponse])
def get_entity_history(
    entity_type: str,
    entity_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return audit_service.entity_history(db, entity_type, entity_id)


@router.get("/user/{user_id}", response_model=list[AuditLogResponse])
def get_user_history(
    user_id: str,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return audit_service.user_history(db, user_id)


@router.get("/{log_id}", response_model=AuditLogResponse)
def get_audit_log(
    log_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return audit_service.get_log(db, log_id)
