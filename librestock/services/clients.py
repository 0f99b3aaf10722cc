# librestock/services/clients.py

from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from librestock.core.audit import AuditContext
from librestock.core.transactions import commit_or_raise
from librestock.models.clients import Client
from librestock.models.enums import AuditAction, AuditEntityType, ClientStatus
from librestock.schemas.client import ClientCreate, ClientUpdate
from librestock.services import audit_logs as audit_service

NON_NULLABLE_FIELDS = ("company_name", "contact_person", "email", "account_status")


def get_client_or_404(db: Session, client_id: UUID) -> Client:
    client = db.query(Client).filter(Client.id == client_id).first()

    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )

    return client


def list_clients(
    db: Session,
    search: str | None = None,
    account_status: ClientStatus | None = None,
) -> list[Client]:
    query = db.query(Client)

    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Client.company_name.ilike(pattern),
                Client.yacht_name.ilike(pattern),
                Client.contact_person.ilike(pattern),
            )
        )

    if account_status is not None:
        query = query.filter(Client.account_status == account_status)

    return query.order_by(Client.company_name.asc()).all()


def create_client(db: Session, data: ClientCreate, context: AuditContext) -> Client:
    client = Client(**data.model_dump())

    db.add(client)
    commit_or_raise(db, "Unable to create client")
    db.refresh(client)

    audit_service.record(
        db,
        context,
        AuditAction.CREATE,
        AuditEntityType.CLIENT,
        client.id,
        after=audit_service.snapshot(client),
    )

    return client


def update_client(db: Session, client_id: UUID, data: ClientUpdate, context: AuditContext) -> Client:
    client = get_client_or_404(db, client_id)
    before = audit_service.snapshot(client)
    values = data.model_dump(exclude_unset=True)

    for key, value in values.items():
        if value is None and key in NON_NULLABLE_FIELDS:
            continue
        setattr(client, key, value)

    commit_or_raise(db, "Unable to update client")
    db.refresh(client)

    action = AuditAction.STATUS_CHANGE if "account_status" in values else AuditAction.UPDATE
    audit_service.record(
        db,
        context,
        action,
        AuditEntityType.CLIENT,
        client.id,
        before=before,
        after=audit_service.snapshot(client),
    )

    return client


def delete_client(db: Session, client_id: UUID, context: AuditContext) -> None:
    client = get_client_or_404(db, client_id)
    before = audit_service.snapshot(client)

    db.delete(client)
    commit_or_raise(
        db,
        "Unable to delete client",
        conflict_detail="Client still has orders",
    )

    audit_service.record(
        db,
        context,
        AuditAction.DELETE,
        AuditEntityType.CLIENT,
        client_id,
        before=before,
    )
