from uuid import UUID
from decimal import Decimal
from datetime import date, datetime
from typing import Literal
from pydantic import BaseModel, Field

from librestock.models.enums import LocationType

InventorySortField = Literal[
    "quantity",
    "created_at",
    "updated_at",
    "expiry_date",
    "received_date",
]


class InventoryCreate(BaseModel):
    product_id: UUID
    location_id: UUID
    area_id: UUID | None = None
    quantity: int = Field(0, ge=0)
    batch_number: str = Field("", max_length=100)
    expiry_date: date | None = None
    cost_per_unit: Decimal | None = Field(None, ge=0)
    received_date: date | None = None


class InventoryUpdate(BaseModel):
    location_id: UUID | None = None
    area_id: UUID | None = None
    quantity: int | None = Field(None, ge=0)
    batch_number: str | None = Field(None, max_length=100)
    expiry_date: date | None = None
    cost_per_unit: Decimal | None = Field(None, ge=0)
    received_date: date | None = None


class InventoryAdjust(BaseModel):
    adjustment: int = Field(..., description="Positive to add stock, negative to remove")


class ProductSummary(BaseModel):
    id: UUID
    sku: str
    name: str
    unit: str | None
    reorder_point: int

    class Config:
        from_attributes = True


class LocationSummary(BaseModel):
    id: UUID
    name: str
    type: LocationType

    class Config:
        from_attributes = True


class AreaSummary(BaseModel):
    id: UUID
    name: str
    code: str

    class Config:
        from_attributes = True


class InventoryResponse(BaseModel):
    id: UUID
    product_id: UUID
    product: ProductSummary | None
    location_id: UUID
    location: LocationSummary | None
    area_id: UUID | None
    area: AreaSummary | None
    quantity: int
    batch_number: str
    expiry_date: date | None
    cost_per_unit: float | None
    received_date: date | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
