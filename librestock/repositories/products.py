# librestock/repositories/products.py

from decimal import Decimal
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from librestock.core.pagination import paginate
from librestock.models.products import Product


def find_all(db: Session) -> list[Product]:
    return db.query(Product).order_by(Product.name.asc()).all()


def find_by_id(db: Session, product_id: UUID) -> Product | None:
    return db.query(Product).filter(Product.id == product_id).first()


def find_by_ids(db: Session, product_ids: list[UUID]) -> list[Product]:
    if not product_ids:
        return []
    return db.query(Product).filter(Product.id.in_(product_ids)).all()


def find_by_sku(db: Session, sku: str) -> Product | None:
    return db.query(Product).filter(Product.sku == sku).first()


def find_by_category_ids(db: Session, category_ids: list[UUID]) -> list[Product]:
    return (
        db.query(Product)
        .filter(Product.category_id.in_(category_ids))
        .order_by(Product.name.asc())
        .all()
    )


def find_paginated(
    db: Session,
    page: int,
    limit: int,
    search: str | None = None,
    category_id: UUID | None = None,
    brand_id: UUID | None = None,
    primary_supplier_id: UUID | None = None,
    is_active: bool | None = None,
    is_perishable: bool | None = None,
    min_price: Decimal | None = None,
    max_price: Decimal | None = None,
    sort_by: str = "created_at",
    sort_order: str = "DESC",
) -> dict:
    query = db.query(Product)

    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Product.name.ilike(pattern), Product.sku.ilike(pattern)))

    if category_id is not None:
        query = query.filter(Product.category_id == category_id)

    if brand_id is not None:
        query = query.filter(Product.brand_id == brand_id)

    if primary_supplier_id is not None:
        query = query.filter(Product.primary_supplier_id == primary_supplier_id)

    if is_active is not None:
        query = query.filter(Product.is_active == is_active)

    if is_perishable is not None:
        query = query.filter(Product.is_perishable == is_perishable)

    if min_price is not None:
        query = query.filter(Product.standard_price >= min_price)

    if max_price is not None:
        query = query.filter(Product.standard_price <= max_price)

    column = getattr(Product, sort_by)
    query = query.order_by(column.asc() if sort_order == "ASC" else column.desc())

    return paginate(query, page, limit)


def update_many(db: Session, product_ids: list[UUID], values: dict) -> int:
    affected = (
        db.query(Product)
        .filter(Product.id.in_(product_ids))
        .update(values, synchronize_session=False)
    )
    db.commit()
    return affected


def delete_many(db: Session, product_ids: list[UUID]) -> int:
    affected = (
        db.query(Product)
        .filter(Product.id.in_(product_ids))
        .delete(synchronize_session=False)
    )
    db.commit()
    return affected
