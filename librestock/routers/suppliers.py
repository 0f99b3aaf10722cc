# librestock/routers/suppliers.py

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from librestock.core.auth import get_current_user
from librestock.core.audit import AuditContext, get_audit_context
from librestock.database import get_db
from librestock.schemas.supplier import (
    SupplierCreate,
    SupplierProductCreate,
    SupplierProductResponse,
    SupplierResponse,
    SupplierUpdate,
)
from librestock.services import suppliers as supplier_service

router = APIRouter(
    prefix="/suppliers",
    tags=["Suppliers"],
)


@router.get("", response_model=list[SupplierResponse])
def list_suppliers(
    search: str | None = Query(None, max_length=200),
    is_active: bool | None = None,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return supplier_service.list_suppliers(db, search=search, is_active=is_active)


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(
    supplier_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return supplier_service.get_supplier_or_404(db, supplier_id)


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
def create_supplier(
    supplier_data: SupplierCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return supplier_service.create_supplier(db, supplier_data, context)


@router.put("/{supplier_id}", response_model=SupplierResponse)
def update_supplier(
    supplier_id: UUID,
    supplier_data: SupplierUpdate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return supplier_service.update_supplier(db, supplier_id, supplier_data, context)


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_supplier(
    supplier_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    supplier_service.delete_supplier(db, supplier_id, context)
    return None


# ---------------- SUPPLIER PRODUCTS ----------------
@router.get("/{supplier_id}/products", response_model=list[SupplierProductResponse])
def list_supplier_products(
    supplier_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return supplier_service.list_supplier_products(db, supplier_id)


@router.post(
    "/{supplier_id}/products",
    response_model=SupplierProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def link_supplier_product(
    supplier_id: UUID,
    link_data: SupplierProductCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return supplier_service.link_product(db, supplier_id, link_data, context)


@router.delete("/{supplier_id}/products/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
def unlink_supplier_product(
    supplier_id: UUID,
    link_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    supplier_service.unlink_product(db, supplier_id, link_id, context)
    return None
