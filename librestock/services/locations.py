# librestock/services/locations.py

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from librestock.core.audit import AuditContext
from librestock.core.transactions import commit_or_raise
from librestock.models.enums import AuditAction, AuditEntityType
from librestock.models.locations import Location
from librestock.repositories import locations as location_repository
from librestock.schemas.location import LocationCreate, LocationUpdate
from librestock.services import audit_logs as audit_service

logger = logging.getLogger("librestock")


def get_location_or_404(db: Session, location_id: UUID) -> Location:
    location = location_repository.find_by_id(db, location_id)

    if not location:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found",
        )

    return location


def create_location(db: Session, data: LocationCreate, context: AuditContext) -> Location:
    location = Location(**data.model_dump())

    db.add(location)
    commit_or_raise(db, "Unable to create location")
    db.refresh(location)

    logger.info(f"Location created: {location.id} ({location.name})")
    audit_service.record(
        db,
        context,
        AuditAction.CREATE,
        AuditEntityType.LOCATION,
        location.id,
        after=audit_service.snapshot(location),
    )

    return location


def update_location(
    db: Session,
    location_id: UUID,
    data: LocationUpdate,
    context: AuditContext,
) -> Location:
    location = get_location_or_404(db, location_id)
    before = audit_service.snapshot(location)

    for key, value in data.model_dump(exclude_unset=True).items():
        # name/type/is_active are not nullable
        if value is None and key in ("name", "type", "is_active"):
            continue
        setattr(location, key, value)

    commit_or_raise(db, "Unable to update location")
    db.refresh(location)

    audit_service.record(
        db,
        context,
        AuditAction.UPDATE,
        AuditEntityType.LOCATION,
        location.id,
        before=before,
        after=audit_service.snapshot(location),
    )

    return location


def delete_location(db: Session, location_id: UUID, context: AuditContext) -> None:
    location = get_location_or_404(db, location_id)
    before = audit_service.snapshot(location)

    db.delete(location)
    commit_or_raise(db, "Unable to delete location")

    logger.info(f"Location deleted: {location_id}")
    audit_service.record(
        db,
        context,
        AuditAction.DELETE,
        AuditEntityType.LOCATION,
        location_id,
        before=before,
    )
