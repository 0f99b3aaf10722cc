# librestock/repositories/areas.py

from uuid import UUID

from sqlalchemy.orm import Session

from librestock.models.areas import Area


def find_by_id(db: Session, area_id: UUID) -> Area | None:
    return db.query(Area).filter(Area.id == area_id).first()


def find_all(
    db: Session,
    location_id: UUID | None = None,
    parent_id: UUID | None = None,
    root_only: bool = False,
    is_active: bool | None = None,
) -> list[Area]:
    query = db.query(Area)

    if location_id is not None:
        query = query.filter(Area.location_id == location_id)

    if root_only:
        query = query.filter(Area.parent_id.is_(None))
    elif parent_id is not None:
        query = query.filter(Area.parent_id == parent_id)

    if is_active is not None:
        query = query.filter(Area.is_active == is_active)

    return query.order_by(Area.name.asc()).all()


def find_children(db: Session, parent_id: UUID) -> list[Area]:
    return (
        db.query(Area)
        .filter(Area.parent_id == parent_id)
        .order_by(Area.name.asc())
        .all()
    )


def find_parent_id(db: Session, area_id: UUID) -> UUID | None:
    row = db.query(Area.parent_id).filter(Area.id == area_id).first()
    return row[0] if row else None
