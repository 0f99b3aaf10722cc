# librestock/routers/categories.py

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from librestock.core.auth import get_current_user
from librestock.core.audit import AuditContext, get_audit_context
from librestock.database import get_db
from librestock.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    CategoryWithChildrenResponse,
)
from librestock.services import categories as category_service

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
)


@router.get("", response_model=list[CategoryWithChildrenResponse])
def list_categories(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return category_service.list_tree(db)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    category_data: CategoryCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return category_service.create_category(db, category_data, context)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: UUID,
    category_data: CategoryUpdate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return category_service.update_category(db, category_id, category_data, context)


@router.delete("/{category_id}")
def delete_category(
    category_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    category_service.delete_category(db, category_id, context)
    return {"message": "Category deleted successfully"}
