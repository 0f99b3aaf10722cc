from uuid import UUID
from decimal import Decimal
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field

DIMENSIONS_PATTERN = r"^\d+(\.\d+)?x\d+(\.\d+)?x\d+(\.\d+)?$"

ProductSortField = Literal[
    "name",
    "sku",
    "created_at",
    "updated_at",
    "standard_price",
    "standard_cost",
    "reorder_point",
]


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    category_id: UUID
    brand_id: UUID | None = None
    volume_ml: int | None = Field(None, ge=0)
    weight_kg: Decimal | None = Field(None, ge=0)
    dimensions_cm: str | None = Field(
        None,
        max_length=50,
        pattern=DIMENSIONS_PATTERN,
        description="Length x width x height, e.g. 10x20x5.5",
    )
    standard_cost: Decimal | None = Field(None, ge=0, lt=100_000_000)
    standard_price: Decimal | None = Field(None, ge=0, lt=100_000_000)
    markup_percentage: Decimal | None = Field(None, ge=0, le=1000)
    reorder_point: int = Field(0, ge=0)
    primary_supplier_id: UUID | None = None
    supplier_sku: str | None = Field(None, max_length=50)
    barcode: str | None = Field(None, max_length=100)
    unit: str | None = Field(None, max_length=50)
    is_active: bool = True
    is_perishable: bool = False
    notes: str | None = None


class ProductCreate(ProductBase):
    sku: str = Field(..., min_length=1, max_length=50)


class ProductUpdate(BaseModel):
    sku: str | None = Field(None, min_length=1, max_length=50)
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    category_id: UUID | None = None
    brand_id: UUID | None = None
    volume_ml: int | None = Field(None, ge=0)
    weight_kg: Decimal | None = Field(None, ge=0)
    dimensions_cm: str | None = Field(None, max_length=50, pattern=DIMENSIONS_PATTERN)
    standard_cost: Decimal | None = Field(None, ge=0, lt=100_000_000)
    standard_price: Decimal | None = Field(None, ge=0, lt=100_000_000)
    markup_percentage: Decimal | None = Field(None, ge=0, le=1000)
    reorder_point: int | None = Field(None, ge=0)
    primary_supplier_id: UUID | None = None
    supplier_sku: str | None = Field(None, max_length=50)
    barcode: str | None = Field(None, max_length=100)
    unit: str | None = Field(None, max_length=50)
    is_active: bool | None = None
    is_perishable: bool | None = None
    notes: str | None = None


class ProductResponse(BaseModel):
    id: UUID
    sku: str
    name: str
    description: str | None
    category_id: UUID
    brand_id: UUID | None
    volume_ml: int | None
    weight_kg: float | None
    dimensions_cm: str | None
    standard_cost: float | None
    standard_price: float | None
    markup_percentage: float | None
    reorder_point: int
    primary_supplier_id: UUID | None
    supplier_sku: str | None
    barcode: str | None
    unit: str | None
    is_active: bool
    is_perishable: bool
    notes: str | None
    created_by: str | None
    updated_by: str | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ---------------- BULK ----------------

class BulkCreateProducts(BaseModel):
    products: list[ProductCreate] = Field(..., min_length=1, max_length=100)


class BulkUpdateStatus(BaseModel):
    ids: list[UUID] = Field(..., min_length=1, max_length=100)
    is_active: bool


class BulkDelete(BaseModel):
    ids: list[UUID] = Field(..., min_length=1, max_length=100)
