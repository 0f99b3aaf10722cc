# librestock/models/orders.py

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

from librestock.database import Base
from librestock.models.enums import OrderStatus
from librestock.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Order(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "orders"

    order_number = Column(String(50), nullable=False, unique=True)
    client_id = Column(Uuid, ForeignKey("clients.id", ondelete="RESTRICT"), nullable=False)
    status = Column(Enum(OrderStatus, name="order_status"), nullable=False, default=OrderStatus.DRAFT)

    delivery_deadline = Column(DateTime(timezone=True), nullable=True)
    delivery_address = Column(Text, nullable=False)
    yacht_name = Column(String(200), nullable=True)
    special_instructions = Column(Text, nullable=True)
    total_amount = Column(Numeric(12, 2), nullable=False, default=0)

    assigned_to = Column(String(255), nullable=True)
    created_by = Column(String(255), nullable=False)

    confirmed_at = Column(DateTime(timezone=True), nullable=True)
    shipped_at = Column(DateTime(timezone=True), nullable=True)
    delivered_at = Column(DateTime(timezone=True), nullable=True)

    client = relationship("Client")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_orders_client_id", "client_id"),
        Index("ix_orders_status", "status"),
    )


class OrderItem(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "order_items"

    order_id = Column(Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Uuid, ForeignKey("products.id", ondelete="RESTRICT"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(12, 2), nullable=False)
    subtotal = Column(Numeric(12, 2), nullable=False)
    notes = Column(Text, nullable=True)
    quantity_picked = Column(Integer, nullable=False, default=0)
    quantity_packed = Column(Integer, nullable=False, default=0)

    order = relationship("Order", back_populates="items")

    __table_args__ = (
        Index("ix_order_items_order_id", "order_id"),
        CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
    )
