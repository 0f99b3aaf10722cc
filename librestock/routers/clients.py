# librestock/routers/clients.py

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from librestock.core.auth import get_current_user
from librestock.core.audit import AuditContext, get_audit_context
from librestock.database import get_db
from librestock.models.enums import ClientStatus
from librestock.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from librestock.services import clients as client_service

router = APIRouter(
    prefix="/clients",
    tags=["Clients"],
)


@router.get("", response_model=list[ClientResponse])
def list_clients(
    search: str | None = Query(None, max_length=200),
    account_status: ClientStatus | None = None,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return client_service.list_clients(db, search=search, account_status=account_status)


@router.get("/{client_id}", response_model=ClientResponse)
def get_client(
    client_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return client_service.get_client_or_404(db, client_id)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(
    client_data: ClientCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return client_service.create_client(db, client_data, context)


@router.put("/{client_id}", response_model=ClientResponse)
def update_client(
    client_id: UUID,
    client_data: ClientUpdate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return client_service.update_client(db, client_id, client_data, context)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(
    client_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    client_service.delete_client(db, client_id, context)
    return None
