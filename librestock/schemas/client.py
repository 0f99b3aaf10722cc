from uuid import UUID
from decimal import Decimal
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from librestock.models.enums import ClientStatus


class ClientCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=200)
    yacht_name: str | None = Field(None, max_length=200)
    contact_person: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: str | None = Field(None, max_length=50)
    billing_address: str | None = None
    default_delivery_address: str | None = None
    account_status: ClientStatus = ClientStatus.ACTIVE
    payment_terms: str | None = Field(None, max_length=100)
    credit_limit: Decimal | None = Field(None, ge=0)
    notes: str | None = None


class ClientUpdate(BaseModel):
    company_name: str | None = Field(None, min_length=1, max_length=200)
    yacht_name: str | None = Field(None, max_length=200)
    contact_person: str | None = Field(None, min_length=1, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    billing_address: str | None = None
    default_delivery_address: str | None = None
    account_status: ClientStatus | None = None
    payment_terms: str | None = Field(None, max_length=100)
    credit_limit: Decimal | None = Field(None, ge=0)
    notes: str | None = None


class ClientResponse(BaseModel):
    id: UUID
    company_name: str
    yacht_name: str | None
    contact_person: str
    email: str
    phone: str | None
    billing_address: str | None
    default_delivery_address: str | None
    account_status: ClientStatus
    payment_terms: str | None
    credit_limit: float | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
