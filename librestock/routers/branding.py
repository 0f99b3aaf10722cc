# librestock/routers/branding.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from librestock.core.audit import AuditContext, get_audit_context
from librestock.database import get_db
from librestock.models.enums import AuditAction, AuditEntityType
from librestock.schemas.branding import BrandingResponse, BrandingUpdate
from librestock.services import audit_logs as audit_service
from librestock.services.branding import BrandingService

router = APIRouter(
    prefix="/branding",
    tags=["Branding"],
)


# ---------------- PUBLIC ----------------
@router.get("", response_model=BrandingResponse)
def get_branding(db: Session = Depends(get_db)):
    return BrandingService(db).get()


# ---------------- UPDATE ----------------
@router.put("", response_model=BrandingResponse)
def update_branding(
    branding_data: BrandingUpdate,
    db: Session = Depends(get_db),
    context: AuditContext = Depends(get_audit_context),
):
    service = BrandingService(db)
    before = service.get().model_dump(mode="json", exclude={"powered_by"})
    branding = service.update(branding_data, context.user_id)

    audit_service.record(
        db,
        context,
        AuditAction.UPDATE,
        AuditEntityType.BRANDING,
        None,
        before=before,
        after=branding.model_dump(mode="json", exclude={"powered_by"}),
    )

    return branding
