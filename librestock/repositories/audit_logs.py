# librestock/repositories/audit_logs.py

from datetime import datetime
from uuid import UUID

from sqlalchemy.orm import Session

from librestock.core.pagination import paginate
from librestock.models.audit_logs import AuditLog
from librestock.models.enums import AuditAction


def create(db: Session, **values) -> AuditLog:
    log = AuditLog(**values)
    db.add(log)
    db.commit()
    db.refresh(log)
    return log


def find_by_id(db: Session, log_id: UUID) -> AuditLog | None:
    return db.query(AuditLog).filter(AuditLog.id == log_id).first()


def find_paginated(
    db: Session,
    page: int,
    limit: int,
    entity_type: str | None = None,
    entity_id: UUID | None = None,
    user_id: str | None = None,
    action: AuditAction | None = None,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
) -> dict:
    query = db.query(AuditLog)

    if entity_type:
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id is not None:
        query = query.filter(AuditLog.entity_id == entity_id)

    if user_id:
        query = query.filter(AuditLog.user_id == user_id)

    if action is not None:
        query = query.filter(AuditLog.action == action)

    if from_date is not None:
        query = query.filter(AuditLog.created_at >= from_date)

    if to_date is not None:
        query = query.filter(AuditLog.created_at <= to_date)

    query = query.order_by(AuditLog.created_at.desc())

    return paginate(query, page, limit)


def find_by_entity(db: Session, entity_type: str, entity_id: UUID) -> list[AuditLog]:
    return (
        db.query(AuditLog)
        .filter(AuditLog.entity_type == entity_type, AuditLog.entity_id == entity_id)
        .order_by(AuditLog.created_at.desc())
        .all()
    )


def find_by_user(db: Session, user_id: str) -> list[AuditLog]:
    return (
        db.query(AuditLog)
        .filter(AuditLog.user_id == user_id)
        .order_by(AuditLog.created_at.desc())
        .all()
    )
