import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger("librestock")


def _conflict_message(
    error: IntegrityError,
    default: str,
    constraint_details: dict[str, str] | None,
) -> str:
    # Match on the constraint/column name the driver reports
    reported = str(error.orig).lower()
    for marker, message in (constraint_details or {}).items():
        if marker.lower() in reported:
            return message
    return default


def commit_or_raise(
    db: Session,
    detail: str,
    conflict_detail: str | None = None,
    constraint_details: dict[str, str] | None = None,
) -> None:
    """Commit the request's session, turning database errors into HTTP errors.

    constraint_details maps a constraint or column name to the 409 message used
    when that constraint is the one violated.
    """
    try:
        db.commit()

    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error: {e.orig}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=_conflict_message(e, conflict_detail or detail, constraint_details),
        )

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )
