# librestock/routers/orders.py

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from librestock.core.auth import get_current_user
from librestock.core.audit import AuditContext, get_audit_context
from librestock.database import get_db
from librestock.models.enums import OrderStatus
from librestock.schemas.order import OrderCreate, OrderResponse, OrderStatusUpdate
from librestock.services import orders as order_service

router = APIRouter(
    prefix="/orders",
    tags=["Orders"],
)


@router.get("", response_model=list[OrderResponse])
def list_orders(
    client_id: UUID | None = None,
    order_status: OrderStatus | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return order_service.list_orders(db, client_id=client_id, status_filter=order_status)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return order_service.get_order_or_404(db, order_id)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    order_data: OrderCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return order_service.create_order(db, order_data, context)


@router.patch("/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: UUID,
    status_data: OrderStatusUpdate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return order_service.update_status(db, order_id, status_data, context)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(
    order_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    order_service.delete_order(db, order_id, context)
    return None
