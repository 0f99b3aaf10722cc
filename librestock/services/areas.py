# =========================================================
# AREA SERVICE
#
# Areas subdivide a location (zone > shelf > bin ...).
# A parent must live in the same location and the
# parent chain may never loop back.
# =========================================================

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from librestock.core.audit import AuditContext
from librestock.core.transactions import commit_or_raise
from librestock.models.areas import Area
from librestock.models.enums import AuditAction, AuditEntityType
from librestock.repositories import areas as area_repository
from librestock.repositories import locations as location_repository
from librestock.schemas.area import AreaCreate, AreaUpdate
from librestock.services import audit_logs as audit_service

logger = logging.getLogger("librestock")

NON_NULLABLE_FIELDS = ("name", "code", "description", "is_active")


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def get_area_or_404(db: Session, area_id: UUID) -> Area:
    area = area_repository.find_by_id(db, area_id)

    if not area:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Area with ID {area_id} not found",
        )

    return area


def _to_node(area: Area) -> dict:
    return {
        "id": area.id,
        "location_id": area.location_id,
        "parent_id": area.parent_id,
        "name": area.name,
        "code": area.code,
        "description": area.description,
        "is_active": area.is_active,
        "created_at": area.created_at,
        "updated_at": area.updated_at,
        "children": [],
    }


def build_hierarchy(areas: list[Area]) -> list[dict]:
    nodes = {area.id: _to_node(area) for area in areas}
    roots = []

    for area in areas:
        parent = nodes.get(area.parent_id) if area.parent_id else None
        if parent is not None:
            parent["children"].append(nodes[area.id])
        else:
            roots.append(nodes[area.id])

    return roots


def list_areas(
    db: Session,
    location_id: UUID | None = None,
    parent_id: UUID | None = None,
    root_only: bool = False,
    is_active: bool | None = None,
    include_children: bool = False,
) -> list:
    if include_children:
        if location_id is None:
            raise _bad_request("location_id is required when include_children is set")
        return build_hierarchy(
            area_repository.find_all(db, location_id=location_id, is_active=is_active)
        )

    return area_repository.find_all(
        db,
        location_id=location_id,
        parent_id=parent_id,
        root_only=root_only,
        is_active=is_active,
    )


def list_children(db: Session, area_id: UUID) -> list[Area]:
    get_area_or_404(db, area_id)
    return area_repository.find_children(db, area_id)


def _check_parent(db: Session, parent_id: UUID, location_id: UUID) -> None:
    parent = area_repository.find_by_id(db, parent_id)

    if not parent:
        raise _bad_request(f"Parent area with ID {parent_id} not found")

    if parent.location_id != location_id:
        raise _bad_request("Parent area must belong to the same location")


def would_create_cycle(db: Session, area_id: UUID, new_parent_id: UUID) -> bool:
    current = new_parent_id
    visited = set()

    while current is not None:
        if current == area_id or current in visited:
            return True
        visited.add(current)
        current = area_repository.find_parent_id(db, current)

    return False


def create_area(db: Session, data: AreaCreate, context: AuditContext) -> Area:
    if not location_repository.find_by_id(db, data.location_id):
        raise _bad_request(f"Location with ID {data.location_id} not found")

    if data.parent_id is not None:
        _check_parent(db, data.parent_id, data.location_id)

    area = Area(**data.model_dump())

    db.add(area)
    commit_or_raise(db, "Unable to create area")
    db.refresh(area)

    logger.info(f"Area created: {area.id} ({area.name}) in location {area.location_id}")
    audit_service.record(
        db,
        context,
        AuditAction.CREATE,
        AuditEntityType.AREA,
        area.id,
        after=audit_service.snapshot(area),
    )

    return area


def update_area(db: Session, area_id: UUID, data: AreaUpdate, context: AuditContext) -> Area:
    area = get_area_or_404(db, area_id)
    before = audit_service.snapshot(area)
    values = data.model_dump(exclude_unset=True)

    new_parent_id = values.get("parent_id")
    if new_parent_id is not None:
        if new_parent_id == area.id:
            raise _bad_request("Area cannot be its own parent")

        _check_parent(db, new_parent_id, area.location_id)

        if would_create_cycle(db, area.id, new_parent_id):
            raise _bad_request("Cannot set parent: would create circular reference")

    for key, value in values.items():
        if value is None and key in NON_NULLABLE_FIELDS:
            continue
        setattr(area, key, value)

    commit_or_raise(db, "Unable to update area")
    db.refresh(area)

    audit_service.record(
        db,
        context,
        AuditAction.UPDATE,
        AuditEntityType.AREA,
        area.id,
        before=before,
        after=audit_service.snapshot(area),
    )

    return area


def delete_area(db: Session, area_id: UUID, context: AuditContext) -> None:
    area = get_area_or_404(db, area_id)
    before = audit_service.snapshot(area)

    db.delete(area)
    commit_or_raise(db, "Unable to delete area")

    logger.info(f"Area deleted: {area_id}")
    audit_service.record(
        db,
        context,
        AuditAction.DELETE,
        AuditEntityType.AREA,
        area_id,
        before=before,
    )
