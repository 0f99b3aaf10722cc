# =========================================================
# CATEGORY SERVICE
#
# Categories form a tree through parent_id.
# Writes refuse any parent change that would make a
# category its own ancestor.
# =========================================================

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from librestock.core.audit import AuditContext
from librestock.core.transactions import commit_or_raise
from librestock.models.categories import Category
from librestock.models.enums import AuditAction, AuditEntityType
from librestock.repositories import categories as category_repository
from librestock.schemas.category import CategoryCreate, CategoryUpdate
from librestock.services import audit_logs as audit_service

logger = logging.getLogger("librestock")


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def get_category_or_404(db: Session, category_id: UUID) -> Category:
    category = category_repository.find_by_id(db, category_id)

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )

    return category


def build_tree(categories: list[Category]) -> list[dict]:
    """Nest a flat list under parent ids; orphans of missing parents become roots."""
    nodes = {
        category.id: {
            "id": category.id,
            "name": category.name,
            "parent_id": category.parent_id,
            "description": category.description,
            "created_at": category.created_at,
            "updated_at": category.updated_at,
            "children": [],
        }
        for category in categories
    }

    roots = []
    for category in categories:
        node = nodes[category.id]
        parent = nodes.get(category.parent_id) if category.parent_id else None
        if parent is not None:
            parent["children"].append(node)
        else:
            roots.append(node)

    return roots


def list_tree(db: Session) -> list[dict]:
    return build_tree(category_repository.find_all(db))


def would_create_cycle(db: Session, category_id: UUID, new_parent_id: UUID) -> bool:
    # Walk up from the new parent; reaching the category means a loop
    current = new_parent_id
    visited = set()

    while current is not None:
        if current == category_id:
            return True
        if current in visited:
            return True
        visited.add(current)
        current = category_repository.find_parent_id(db, current)

    return False


def create_category(db: Session, data: CategoryCreate, context: AuditContext) -> Category:
    if data.parent_id is not None and not category_repository.exists_by_id(db, data.parent_id):
        raise _bad_request("Parent category not found")

    if category_repository.find_by_name_and_parent(db, data.name, data.parent_id):
        raise _bad_request("Category with this name already exists")

    category = Category(
        name=data.name,
        parent_id=data.parent_id,
        description=data.description,
    )

    db.add(category)
    commit_or_raise(db, "Unable to create category")
    db.refresh(category)

    logger.info(f"Category created: {category.id} ({category.name})")
    audit_service.record(
        db,
        context,
        AuditAction.CREATE,
        AuditEntityType.CATEGORY,
        category.id,
        after=audit_service.snapshot(category),
    )

    return category


def update_category(
    db: Session,
    category_id: UUID,
    data: CategoryUpdate,
    context: AuditContext,
) -> Category:
    category = get_category_or_404(db, category_id)
    before = audit_service.snapshot(category)
    values = data.model_dump(exclude_unset=True)

    new_parent_id = values.get("parent_id")
    if new_parent_id is not None:
        if new_parent_id == category.id:
            raise _bad_request("Category cannot be its own parent")

        if not category_repository.exists_by_id(db, new_parent_id):
            raise _bad_request("Parent category not found")

        if would_create_cycle(db, category.id, new_parent_id):
            raise _bad_request("Cannot set parent: would create a circular reference")

    name = values.get("name", category.name)
    parent_id = values.get("parent_id", category.parent_id)
    if name != category.name or parent_id != category.parent_id:
        existing = category_repository.find_by_name_and_parent(db, name, parent_id)
        if existing and existing.id != category.id:
            raise _bad_request("Category with this name already exists")

    for key, value in values.items():
        setattr(category, key, value)

    commit_or_raise(db, "Unable to update category")
    db.refresh(category)

    audit_service.record(
        db,
        context,
        AuditAction.UPDATE,
        AuditEntityType.CATEGORY,
        category.id,
        before=before,
        after=audit_service.snapshot(category),
    )

    return category


def delete_category(db: Session, category_id: UUID, context: AuditContext) -> None:
    category = get_category_or_404(db, category_id)
    before = audit_service.snapshot(category)

    db.delete(category)
    commit_or_raise(
        db,
        "Unable to delete category",
        conflict_detail="Category is still referenced by products",
    )

    logger.info(f"Category deleted: {category_id}")
    audit_service.record(
        db,
        context,
        AuditAction.DELETE,
        AuditEntityType.CATEGORY,
        category_id,
        before=before,
    )
