# librestock/services/suppliers.py

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from librestock.core.audit import AuditContext
from librestock.core.transactions import commit_or_raise
from librestock.models.enums import AuditAction, AuditEntityType
from librestock.models.suppliers import Supplier, SupplierProduct
from librestock.repositories import products as product_repository
from librestock.schemas.supplier import SupplierCreate, SupplierProductCreate, SupplierUpdate
from librestock.services import audit_logs as audit_service

logger = logging.getLogger("librestock")


def get_supplier_or_404(db: Session, supplier_id: UUID) -> Supplier:
    supplier = db.query(Supplier).filter(Supplier.id == supplier_id).first()

    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier not found",
        )

    return supplier


def list_suppliers(
    db: Session,
    search: str | None = None,
    is_active: bool | None = None,
) -> list[Supplier]:
    query = db.query(Supplier)

    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(Supplier.name.ilike(pattern), Supplier.contact_person.ilike(pattern))
        )

    if is_active is not None:
        query = query.filter(Supplier.is_active == is_active)

    return query.order_by(Supplier.name.asc()).all()


def create_supplier(db: Session, data: SupplierCreate, context: AuditContext) -> Supplier:
    supplier = Supplier(**data.model_dump())

    db.add(supplier)
    commit_or_raise(db, "Unable to create supplier")
    db.refresh(supplier)

    audit_service.record(
        db,
        context,
        AuditAction.CREATE,
        AuditEntityType.SUPPLIER,
        supplier.id,
        after=audit_service.snapshot(supplier),
    )

    return supplier


def update_supplier(
    db: Session,
    supplier_id: UUID,
    data: SupplierUpdate,
    context: AuditContext,
) -> Supplier:
    supplier = get_supplier_or_404(db, supplier_id)
    before = audit_service.snapshot(supplier)

    for key, value in data.model_dump(exclude_unset=True).items():
        if value is None and key in ("name", "is_active"):
            continue
        setattr(supplier, key, value)

    commit_or_raise(db, "Unable to update supplier")
    db.refresh(supplier)

    audit_service.record(
        db,
        context,
        AuditAction.UPDATE,
        AuditEntityType.SUPPLIER,
        supplier.id,
        before=before,
        after=audit_service.snapshot(supplier),
    )

    return supplier


def delete_supplier(db: Session, supplier_id: UUID, context: AuditContext) -> None:
    supplier = get_supplier_or_404(db, supplier_id)
    before = audit_service.snapshot(supplier)

    db.delete(supplier)
    commit_or_raise(db, "Unable to delete supplier")

    audit_service.record(
        db,
        context,
        AuditAction.DELETE,
        AuditEntityType.SUPPLIER,
        supplier_id,
        before=before,
    )


# ---------------- SUPPLIER PRODUCTS ----------------

def list_supplier_products(db: Session, supplier_id: UUID) -> list[SupplierProduct]:
    get_supplier_or_404(db, supplier_id)
    return (
        db.query(SupplierProduct)
        .filter(SupplierProduct.supplier_id == supplier_id)
        .order_by(SupplierProduct.is_preferred.desc(), SupplierProduct.created_at.asc())
        .all()
    )


def link_product(
    db: Session,
    supplier_id: UUID,
    data: SupplierProductCreate,
    context: AuditContext,
) -> SupplierProduct:
    get_supplier_or_404(db, supplier_id)

    if not product_repository.find_by_id(db, data.product_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Product not found")

    existing = (
        db.query(SupplierProduct)
        .filter(
            SupplierProduct.supplier_id == supplier_id,
            SupplierProduct.product_id == data.product_id,
        )
        .first()
    )
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Product is already linked to this supplier",
        )

    link = SupplierProduct(supplier_id=supplier_id, **data.model_dump())

    db.add(link)
    commit_or_raise(db, "Unable to link product")
    db.refresh(link)

    audit_service.record(
        db,
        context,
        AuditAction.UPDATE,
        AuditEntityType.SUPPLIER,
        supplier_id,
        after={"linked_product_id": str(data.product_id)},
    )

    return link


def unlink_product(db: Session, supplier_id: UUID, link_id: UUID, context: AuditContext) -> None:
    link = (
        db.query(SupplierProduct)
        .filter(SupplierProduct.id == link_id, SupplierProduct.supplier_id == supplier_id)
        .first()
    )

    if not link:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier product not found",
        )

    product_id = link.product_id
    db.delete(link)
    commit_or_raise(db, "Unable to unlink product")

    audit_service.record(
        db,
        context,
        AuditAction.UPDATE,
        AuditEntityType.SUPPLIER,
        supplier_id,
        before={"linked_product_id": str(product_id)},
        after={"linked_product_id": None},
    )
