# =========================================================
# PRODUCTS ROUTER
#
# CRUD, category lookups, bulk operations and photos.
# Static paths are declared before /{product_id}.
# =========================================================

from decimal import Decimal
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from librestock.core.auth import get_current_user
from librestock.core.audit import AuditContext, get_audit_context
from librestock.core.bulk import BulkOperationResult
from librestock.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page
from librestock.core.rate_limiter import BULK_LIMIT, limiter
from librestock.database import get_db
from librestock.repositories import products as product_repository
from librestock.schemas.photo import PhotoCreate, PhotoResponse
from librestock.schemas.product import (
    BulkCreateProducts,
    BulkDelete,
    BulkUpdateStatus,
    ProductCreate,
    ProductResponse,
    ProductSortField,
    ProductUpdate,
)
from librestock.services import products as product_service

router = APIRouter(
    prefix="/products",
    tags=["Products"],
)


# =========================================================
# LIST / LOOKUP
# =========================================================
@router.get("", response_model=Page[ProductResponse])
def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    search: str | None = Query(None, max_length=200),
    category_id: UUID | None = None,
    brand_id: UUID | None = None,
    primary_supplier_id: UUID | None = None,
    is_active: bool | None = None,
    is_perishable: bool | None = None,
    min_price: Decimal | None = Query(None, ge=0),
    max_price: Decimal | None = Query(None, ge=0),
    sort_by: ProductSortField = "created_at",
    sort_order: Literal["ASC", "DESC"] = "DESC",
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return product_repository.find_paginated(
        db,
        page,
        limit,
        search=search,
        category_id=category_id,
        brand_id=brand_id,
        primary_supplier_id=primary_supplier_id,
        is_active=is_active,
        is_perishable=is_perishable,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/all", response_model=list[ProductResponse])
def list_all_products(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return product_repository.find_all(db)


@router.get("/category/{category_id}", response_model=list[ProductResponse])
def list_products_by_category(
    category_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return product_service.list_by_category(db, category_id)


@router.get("/category/{category_id}/tree", response_model=list[ProductResponse])
def list_products_by_category_tree(
    category_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return product_service.list_by_category_tree(db, category_id)


# =========================================================
# BULK
# =========================================================
@router.post(
    "/bulk",
    response_model=BulkOperationResult,
    response_model_exclude_none=True,
)
@limiter.limit(BULK_LIMIT)
def bulk_create_products(
    request: Request,
    bulk_data: BulkCreateProducts,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return product_service.bulk_create(db, bulk_data, context)


@router.patch(
    "/bulk/status",
    response_model=BulkOperationResult,
    response_model_exclude_none=True,
)
@limiter.limit(BULK_LIMIT)
def bulk_update_product_status(
    request: Request,
    bulk_data: BulkUpdateStatus,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return product_service.bulk_update_status(db, bulk_data, context)


@router.post(
    "/bulk/delete",
    response_model=BulkOperationResult,
    response_model_exclude_none=True,
)
@limiter.limit(BULK_LIMIT)
def bulk_delete_products(
    request: Request,
    bulk_data: BulkDelete,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return product_service.bulk_delete(db, bulk_data, context)


# =========================================================
# SINGLE PRODUCT
# =========================================================
@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return product_service.create_product(db, product_data, context)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return product_service.get_product_or_404(db, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: UUID,
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return product_service.update_product(db, product_id, product_data, context)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    product_service.delete_product(db, product_id, context)
    return None


# =========================================================
# PHOTOS
# =========================================================
@router.get("/{product_id}/photos", response_model=list[PhotoResponse])
def list_product_photos(
    product_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return product_service.list_photos(db, product_id)


@router.post(
    "/{product_id}/photos",
    response_model=PhotoResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_product_photo(
    product_id: UUID,
    photo_data: PhotoCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return product_service.add_photo(db, product_id, photo_data, context)


@router.delete("/{product_id}/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product_photo(
    product_id: UUID,
    photo_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    product_service.delete_photo(db, product_id, photo_id, context)
    return None
