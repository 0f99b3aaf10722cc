# librestock/routers/locations.py

from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from librestock.core.auth import get_current_user
from librestock.core.audit import AuditContext, get_audit_context
from librestock.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page
from librestock.database import get_db
from librestock.models.enums import LocationType
from librestock.repositories import locations as location_repository
from librestock.schemas.location import (
    LocationCreate,
    LocationResponse,
    LocationSortField,
    LocationUpdate,
)
from librestock.services import locations as location_service

router = APIRouter(
    prefix="/locations",
    tags=["Locations"],
)


@router.get("", response_model=Page[LocationResponse])
def list_locations(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    search: str | None = Query(None, max_length=200),
    type: LocationType | None = None,
    is_active: bool | None = None,
    sort_by: LocationSortField = "name",
    sort_order: Literal["ASC", "DESC"] = "ASC",
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return location_repository.find_paginated(
        db,
        page,
        limit,
        search=search,
        type=type,
        is_active=is_active,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/all", response_model=list[LocationResponse])
def list_all_locations(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return location_repository.find_all(db)


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(
    location_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return location_service.get_location_or_404(db, location_id)


@router.post(
    "",
    response_model=LocationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_location(
    location_data: LocationCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return location_service.create_location(db, location_data, context)


@router.put("/{location_id}", response_model=LocationResponse)
def update_location(
    location_id: UUID,
    location_data: LocationUpdate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return location_service.update_location(db, location_id, location_data, context)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(
    location_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    location_service.delete_location(db, location_id, context)
    return None
