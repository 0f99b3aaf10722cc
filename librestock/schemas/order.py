from uuid import UUID
from decimal import Decimal
from datetime import datetime
from pydantic import BaseModel, Field

from librestock.models.enums import OrderStatus


class OrderItemCreate(BaseModel):
    product_id: UUID
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0, lt=100_000_000)
    notes: str | None = None


class OrderCreate(BaseModel):
    client_id: UUID
    delivery_deadline: datetime | None = None
    delivery_address: str = Field(..., min_length=1)
    yacht_name: str | None = Field(None, max_length=200)
    special_instructions: str | None = None
    assigned_to: str | None = None
    items: list[OrderItemCreate] = Field(..., min_length=1)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderItemResponse(BaseModel):
    id: UUID
    product_id: UUID
    quantity: int
    unit_price: float
    subtotal: float
    notes: str | None
    quantity_picked: int
    quantity_packed: int

    class Config:
        from_attributes = True


class OrderResponse(BaseModel):
    id: UUID
    order_number: str
    client_id: UUID
    status: OrderStatus
    delivery_deadline: datetime | None
    delivery_address: str
    yacht_name: str | None
    special_instructions: str | None
    total_amount: float
    assigned_to: str | None
    created_by: str
    confirmed_at: datetime | None
    shipped_at: datetime | None
    delivered_at: datetime | None
    created_at: datetime
    updated_at: datetime
    items: list[OrderItemResponse] = []

    class Config:
        from_attributes = True
