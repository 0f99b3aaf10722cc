# =========================================================
# INVENTORY ROUTER
#
# Stock per product and location.
# Quantity changes after creation go through /adjust so
# every movement lands in the audit log.
# =========================================================

from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from librestock.core.auth import get_current_user
from librestock.core.audit import AuditContext, get_audit_context
from librestock.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page
from librestock.database import get_db
from librestock.repositories import inventory as inventory_repository
from librestock.schemas.inventory import (
    InventoryAdjust,
    InventoryCreate,
    InventoryResponse,
    InventorySortField,
    InventoryUpdate,
)
from librestock.services import inventory as inventory_service

router = APIRouter(
    prefix="/inventory",
    tags=["Inventory"],
)


@router.get("", response_model=Page[InventoryResponse])
def list_inventory(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    product_id: UUID | None = None,
    location_id: UUID | None = None,
    area_id: UUID | None = None,
    search: str | None = Query(None, max_length=100),
    low_stock: bool | None = None,
    expiring_soon: bool | None = None,
    min_quantity: int | None = Query(None, ge=0),
    max_quantity: int | None = Query(None, ge=0),
    sort_by: InventorySortField = "updated_at",
    sort_order: Literal["ASC", "DESC"] = "DESC",
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return inventory_repository.find_paginated(
        db,
        page,
        limit,
        product_id=product_id,
        location_id=location_id,
        area_id=area_id,
        search=search,
        low_stock=low_stock,
        expiring_soon=expiring_soon,
        min_quantity=min_quantity,
        max_quantity=max_quantity,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/all", response_model=list[InventoryResponse])
def list_all_inventory(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return inventory_repository.find_all(db)


@router.get("/product/{product_id}", response_model=list[InventoryResponse])
def list_inventory_by_product(
    product_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return inventory_service.list_by_product(db, product_id)


@router.get("/location/{location_id}", response_model=list[InventoryResponse])
def list_inventory_by_location(
    location_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return inventory_service.list_by_location(db, location_id)


@router.get("/{inventory_id}", response_model=InventoryResponse)
def get_inventory(
    inventory_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return inventory_service.get_inventory_or_404(db, inventory_id)


@router.post("", response_model=InventoryResponse, status_code=status.HTTP_201_CREATED)
def create_inventory(
    inventory_data: InventoryCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return inventory_service.create_inventory(db, inventory_data, context)


@router.put("/{inventory_id}", response_model=InventoryResponse)
def update_inventory(
    inventory_id: UUID,
    inventory_data: InventoryUpdate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return inventory_service.update_inventory(db, inventory_id, inventory_data, context)


@router.patch("/{inventory_id}/adjust", response_model=InventoryResponse)
def adjust_inventory(
    inventory_id: UUID,
    adjust_data: InventoryAdjust,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return inventory_service.adjust_quantity(db, inventory_id, adjust_data, context)


@router.delete("/{inventory_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory(
    inventory_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    inventory_service.delete_inventory(db, inventory_id, context)
    return None
