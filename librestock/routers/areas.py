# librestock/routers/areas.py

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from librestock.core.auth import get_current_user
from librestock.core.audit import AuditContext, get_audit_context
from librestock.database import get_db
from librestock.schemas.area import (
    AreaCreate,
    AreaResponse,
    AreaUpdate,
    AreaWithChildrenResponse,
)
from librestock.services import areas as area_service

router = APIRouter(
    prefix="/areas",
    tags=["Areas"],
)


# With include_children the areas come back nested, otherwise flat
@router.get("", response_model=list[AreaWithChildrenResponse])
def list_areas(
    location_id: UUID | None = None,
    parent_id: UUID | None = None,
    root_only: bool = False,
    is_active: bool | None = None,
    include_children: bool = False,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return area_service.list_areas(
        db,
        location_id=location_id,
        parent_id=parent_id,
        root_only=root_only,
        is_active=is_active,
        include_children=include_children,
    )


@router.get("/{area_id}", response_model=AreaResponse)
def get_area(
    area_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return area_service.get_area_or_404(db, area_id)


@router.get("/{area_id}/children", response_model=list[AreaResponse])
def list_area_children(
    area_id: UUID,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return area_service.list_children(db, area_id)


@router.post(
    "",
    response_model=AreaResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_area(
    area_data: AreaCreate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return area_service.create_area(db, area_data, context)


@router.put("/{area_id}", response_model=AreaResponse)
def update_area(
    area_id: UUID,
    area_data: AreaUpdate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    return area_service.update_area(db, area_id, area_data, context)


@router.delete("/{area_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_area(
    area_id: UUID,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    area_service.delete_area(db, area_id, context)
    return None
