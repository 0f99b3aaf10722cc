# =========================================================
# ORDER SERVICE
#
# Line subtotals and the order total are computed here,
# never taken from the caller.
# =========================================================

import logging
import secrets
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, selectinload

from librestock.core.audit import AuditContext
from librestock.core.transactions import commit_or_raise
from librestock.models.enums import AuditAction, AuditEntityType, OrderStatus
from librestock.models.orders import Order, OrderItem
from librestock.repositories import products as product_repository
from librestock.schemas.order import OrderCreate, OrderStatusUpdate
from librestock.services import audit_logs as audit_service
from librestock.services.clients import get_client_or_404

logger = logging.getLogger("librestock")

# Timestamp column stamped when an order enters the status
STATUS_TIMESTAMPS = {
    OrderStatus.CONFIRMED: "confirmed_at",
    OrderStatus.SHIPPED: "shipped_at",
    OrderStatus.DELIVERED: "delivered_at",
}


def generate_order_number(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"ORD-{now:%Y%m%d}-{secrets.token_hex(3).upper()}"


def get_order_or_404(db: Session, order_id: UUID) -> Order:
    order = (
        db.query(Order)
        .options(selectinload(Order.items))
        .filter(Order.id == order_id)
        .first()
    )

    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found",
        )

    return order


def list_orders(
    db: Session,
    client_id: UUID | None = None,
    status_filter: OrderStatus | None = None,
) -> list[Order]:
    query = db.query(Order).options(selectinload(Order.items))

    if client_id is not None:
        query = query.filter(Order.client_id == client_id)

    if status_filter is not None:
        query = query.filter(Order.status == status_filter)

    return query.order_by(Order.created_at.desc()).all()


def create_order(db: Session, data: OrderCreate, context: AuditContext) -> Order:
    client = get_client_or_404(db, data.client_id)

    product_ids = [item.product_id for item in data.items]
    if len(product_ids) != len(set(product_ids)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Duplicate products in order are not allowed",
        )

    found = {product.id for product in product_repository.find_by_ids(db, product_ids)}
    missing = [str(product_id) for product_id in product_ids if product_id not in found]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Products not found: {', '.join(missing)}",
        )

    total_amount = Decimal("0.00")
    items = []
    for item in data.items:
        subtotal = item.unit_price * item.quantity
        total_amount += subtotal
        items.append(
            OrderItem(
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
                subtotal=subtotal,
                notes=item.notes,
            )
        )

    order = Order(
        order_number=generate_order_number(),
        client_id=client.id,
        status=OrderStatus.DRAFT,
        delivery_deadline=data.delivery_deadline,
        delivery_address=data.delivery_address,
        yacht_name=data.yacht_name or client.yacht_name,
        special_instructions=data.special_instructions,
        assigned_to=data.assigned_to,
        created_by=context.user_id,
        total_amount=total_amount,
        items=items,
    )

    db.add(order)
    commit_or_raise(db, "Unable to create order")

    logger.info(f"Order created: {order.order_number} total={total_amount}")
    audit_service.record(
        db,
        context,
        AuditAction.CREATE,
        AuditEntityType.ORDER,
        order.id,
        after=audit_service.snapshot(order),
    )

    return get_order_or_404(db, order.id)


def update_status(
    db: Session,
    order_id: UUID,
    data: OrderStatusUpdate,
    context: AuditContext,
) -> Order:
    order = get_order_or_404(db, order_id)
    previous_status = order.status

    if previous_status == data.status:
        return order

    if previous_status in (OrderStatus.DELIVERED, OrderStatus.CANCELLED):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot change status of a {previous_status.value} order",
        )

    order.status = data.status
    timestamp_field = STATUS_TIMESTAMPS.get(data.status)
    if timestamp_field:
        setattr(order, timestamp_field, datetime.now(timezone.utc))

    commit_or_raise(db, "Unable to update order status")

    logger.info(f"Order {order_id} status: {previous_status.value} -> {data.status.value}")
    audit_service.record(
        db,
        context,
        AuditAction.STATUS_CHANGE,
        AuditEntityType.ORDER,
        order_id,
        before={"status": previous_status.value},
        after={"status": data.status.value},
    )

    return get_order_or_404(db, order_id)


def delete_order(db: Session, order_id: UUID, context: AuditContext) -> None:
    order = get_order_or_404(db, order_id)
    before = audit_service.snapshot(order)

    db.delete(order)
    commit_or_raise(db, "Unable to delete order")

    audit_service.record(
        db,
        context,
        AuditAction.DELETE,
        AuditEntityType.ORDER,
        order_id,
        before=before,
    )
