# librestock/repositories/inventory.py

from datetime import date, timedelta
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from librestock.core.pagination import paginate
from librestock.models.inventory import Inventory
from librestock.models.products import Product

EXPIRING_SOON_DAYS = 30


def _with_relations(db: Session):
    return db.query(Inventory).options(
        joinedload(Inventory.product),
        joinedload(Inventory.location),
        joinedload(Inventory.area),
    )


def find_all(db: Session) -> list[Inventory]:
    return _with_relations(db).order_by(Inventory.updated_at.desc()).all()


def find_by_id(db: Session, inventory_id: UUID) -> Inventory | None:
    return _with_relations(db).filter(Inventory.id == inventory_id).first()


def find_by_product(db: Session, product_id: UUID) -> list[Inventory]:
    return (
        _with_relations(db)
        .filter(Inventory.product_id == product_id)
        .order_by(Inventory.updated_at.desc())
        .all()
    )


def find_by_location(db: Session, location_id: UUID) -> list[Inventory]:
    return (
        _with_relations(db)
        .filter(Inventory.location_id == location_id)
        .order_by(Inventory.updated_at.desc())
        .all()
    )


def find_by_product_and_location(
    db: Session,
    product_id: UUID,
    location_id: UUID,
) -> Inventory | None:
    return (
        db.query(Inventory)
        .filter(
            Inventory.product_id == product_id,
            Inventory.location_id == location_id,
        )
        .first()
    )


def find_paginated(
    db: Session,
    page: int,
    limit: int,
    product_id: UUID | None = None,
    location_id: UUID | None = None,
    area_id: UUID | None = None,
    search: str | None = None,
    low_stock: bool | None = None,
    expiring_soon: bool | None = None,
    min_quantity: int | None = None,
    max_quantity: int | None = None,
    sort_by: str = "updated_at",
    sort_order: str = "DESC",
    today: date | None = None,
) -> dict:
    query = _with_relations(db)

    if product_id is not None:
        query = query.filter(Inventory.product_id == product_id)

    if location_id is not None:
        query = query.filter(Inventory.location_id == location_id)

    if area_id is not None:
        query = query.filter(Inventory.area_id == area_id)

    if search:
        query = query.filter(Inventory.batch_number.ilike(f"%{search}%"))

    if low_stock:
        query = query.join(Product, Inventory.product_id == Product.id).filter(
            Inventory.quantity <= Product.reorder_point
        )

    if expiring_soon:
        today = today or date.today()
        query = query.filter(
            Inventory.expiry_date.isnot(None),
            Inventory.expiry_date >= today,
            Inventory.expiry_date <= today + timedelta(days=EXPIRING_SOON_DAYS),
        )

    if min_quantity is not None:
        query = query.filter(Inventory.quantity >= min_quantity)

    if max_quantity is not None:
        query = query.filter(Inventory.quantity <= max_quantity)

    column = getattr(Inventory, sort_by)
    query = query.order_by(column.asc() if sort_order == "ASC" else column.desc())

    return paginate(query, page, limit)


def adjust_quantity(db: Session, inventory_id: UUID, adjustment: int) -> int:
    """Apply a relative change, refusing to go below zero. Returns rows updated."""
    affected = (
        db.query(Inventory)
        .filter(
            Inventory.id == inventory_id,
            Inventory.quantity + adjustment >= 0,
        )
        .update(
            {Inventory.quantity: Inventory.quantity + adjustment},
            synchronize_session=False,
        )
    )
    db.commit()
    return affected
