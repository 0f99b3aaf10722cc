# =========================================================
# AUDIT LOG SERVICE
# Append-only record of who changed what.
# A failed audit write is logged and never fails the request.
# =========================================================

import logging
from typing import Any, Iterable
from uuid import UUID

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from librestock.core.audit import AuditContext
from librestock.models.audit_logs import AuditLog
from librestock.models.enums import AuditAction, AuditEntityType
from librestock.repositories import audit_logs as audit_log_repository

logger = logging.getLogger("librestock")


def snapshot(entity) -> dict[str, Any]:
    """Column values of an ORM instance, JSON-ready."""
    mapper = inspect(entity).mapper
    return jsonable_encoder(
        {column.key: getattr(entity, column.key) for column in mapper.column_attrs}
    )


def compute_changes(
    before: dict[str, Any] | None,
    after: dict[str, Any] | None,
    fields: Iterable[str] | None = None,
) -> dict[str, Any] | None:
    if before is None and after is None:
        return None

    if before is None or after is None:
        return {"before": before, "after": after}

    keys = list(fields) if fields is not None else sorted(set(before) | set(after))
    changed_before = {}
    changed_after = {}

    for key in keys:
        if before.get(key) != after.get(key):
            changed_before[key] = before.get(key)
            changed_after[key] = after.get(key)

    if not changed_after:
        return None

    return {"before": changed_before, "after": changed_after}


def record(
    db: Session,
    context: AuditContext | None,
    action: AuditAction,
    entity_type: AuditEntityType,
    entity_id: UUID | None,
    before: dict[str, Any] | None = None,
    after: dict[str, Any] | None = None,
) -> AuditLog | None:
    try:
        return audit_log_repository.create(
            db,
            user_id=context.user_id if context else None,
            action=action,
            entity_type=entity_type.value,
            entity_id=entity_id,
            changes=compute_changes(before, after),
            ip_address=context.ip_address if context else None,
            user_agent=context.user_agent if context else None,
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(
            f"Failed to write audit log {action.value} {entity_type.value} {entity_id}: {str(e)}"
        )
        return None


# ---------------- QUERIES ----------------

def get_log(db: Session, log_id: UUID) -> AuditLog:
    log = audit_log_repository.find_by_id(db, log_id)

    if not log:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Audit log not found",
        )

    return log


def list_logs(db: Session, page: int, limit: int, **filters) -> dict:
    return audit_log_repository.find_paginated(db, page, limit, **filters)


def entity_history(db: Session, entity_type: str, entity_id: UUID) -> list[AuditLog]:
    return audit_log_repository.find_by_entity(db, entity_type, entity_id)


def user_history(db: Session, user_id: str) -> list[AuditLog]:
    return audit_log_repository.find_by_user(db, user_id)
