# librestock/repositories/locations.py

from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from librestock.core.pagination import paginate
from librestock.models.enums import LocationType
from librestock.models.locations import Location


def find_all(db: Session) -> list[Location]:
    return db.query(Location).order_by(Location.name.asc()).all()


def find_by_id(db: Session, location_id: UUID) -> Location | None:
    return db.query(Location).filter(Location.id == location_id).first()


def find_paginated(
    db: Session,
    page: int,
    limit: int,
    search: str | None = None,
    type: LocationType | None = None,
    is_active: bool | None = None,
    sort_by: str = "name",
    sort_order: str = "ASC",
) -> dict:
    query = db.query(Location)

    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Location.name.ilike(pattern),
                Location.address.ilike(pattern),
                Location.contact_person.ilike(pattern),
            )
        )

    if type is not None:
        query = query.filter(Location.type == type)

    if is_active is not None:
        query = query.filter(Location.is_active == is_active)

    column = getattr(Location, sort_by)
    query = query.order_by(column.asc() if sort_order == "ASC" else column.desc())

    return paginate(query, page, limit)
