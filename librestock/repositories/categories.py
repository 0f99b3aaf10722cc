# librestock/repositories/categories.py

from uuid import UUID

from sqlalchemy.orm import Session

from librestock.models.categories import Category


def find_all(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def find_by_id(db: Session, category_id: UUID) -> Category | None:
    return db.query(Category).filter(Category.id == category_id).first()


def exists_by_id(db: Session, category_id: UUID) -> bool:
    return db.query(Category.id).filter(Category.id == category_id).first() is not None


def find_by_name_and_parent(
    db: Session,
    name: str,
    parent_id: UUID | None,
) -> Category | None:
    query = db.query(Category).filter(Category.name == name)
    if parent_id is None:
        query = query.filter(Category.parent_id.is_(None))
    else:
        query = query.filter(Category.parent_id == parent_id)
    return query.first()


def find_parent_id(db: Session, category_id: UUID) -> UUID | None:
    row = db.query(Category.parent_id).filter(Category.id == category_id).first()
    return row[0] if row else None


def find_child_ids(db: Session, parent_ids: list[UUID]) -> list[UUID]:
    if not parent_ids:
        return []
    rows = db.query(Category.id).filter(Category.parent_id.in_(parent_ids)).all()
    return [row[0] for row in rows]


def find_all_descendant_ids(db: Session, category_id: UUID) -> list[UUID]:
    # Breadth-first, one query per tree level
    descendants: list[UUID] = []
    frontier = [category_id]
    seen = {category_id}

    while frontier:
        children = [child for child in find_child_ids(db, frontier) if child not in seen]
        seen.update(children)
        descendants.extend(children)
        frontier = children

    return descendants
