from uuid import UUID
from decimal import Decimal
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field


class SupplierCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    contact_person: str | None = Field(None, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    website: str | None = Field(None, max_length=500)
    notes: str | None = None
    is_active: bool = True


class SupplierUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    contact_person: str | None = Field(None, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    website: str | None = Field(None, max_length=500)
    notes: str | None = None
    is_active: bool | None = None


class SupplierResponse(BaseModel):
    id: UUID
    name: str
    contact_person: str | None
    email: str | None
    phone: str | None
    address: str | None
    website: str | None
    notes: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SupplierProductCreate(BaseModel):
    product_id: UUID
    supplier_sku: str | None = Field(None, max_length=50)
    cost_per_unit: Decimal | None = Field(None, ge=0)
    lead_time_days: int | None = Field(None, ge=0)
    minimum_order_quantity: int | None = Field(None, ge=1)
    is_preferred: bool = False


class SupplierProductResponse(BaseModel):
    id: UUID
    supplier_id: UUID
    product_id: UUID
    supplier_sku: str | None
    cost_per_unit: float | None
    lead_time_days: int | None
    minimum_order_quantity: int | None
    is_preferred: bool
    created_at: datetime

    class Config:
        from_attributes = True
