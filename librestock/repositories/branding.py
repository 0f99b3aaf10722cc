# librestock/repositories/branding.py

from sqlalchemy.orm import Session

from librestock.models.branding import BRANDING_ROW_ID, BrandingSettings


def find(db: Session) -> BrandingSettings | None:
    return db.query(BrandingSettings).filter(BrandingSettings.id == BRANDING_ROW_ID).first()


def upsert(db: Session, defaults: dict, values: dict) -> BrandingSettings:
    """Update row 1 with values, or insert it from defaults plus values."""
    row = find(db)

    if row is None:
        row = BrandingSettings(id=BRANDING_ROW_ID, **{**defaults, **values})
        db.add(row)
    else:
        for key, value in values.items():
            setattr(row, key, value)

    db.commit()
    db.refresh(row)
    return row
