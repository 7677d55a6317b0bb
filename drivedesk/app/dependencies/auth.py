"""Authentication dependencies: current user, role guards and office scope."""

from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from drivedesk.app.core.security import decode_access_token
from drivedesk.app.db.session import get_db
from drivedesk.app.models.office import Office
from drivedesk.app.models.student import Student
from drivedesk.app.models.user import User


def get_current_user(db: Session = Depends(get_db), authorization: str | None = Header(default=None)) -> User:
    # Expect Authorization: Bearer <token>
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Not authenticated")
    token = authorization.split(" ", 1)[1]
    try:
        payload = decode_access_token(token)
    except ValueError:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user_id = payload.get("sub")
    try:
        user_id_int = int(user_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Not authenticated")

    user = db.query(User).filter(User.id == user_id_int).first()
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def get_current_superadmin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != "superadmin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Super admin access required")
    return current_user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role not in ("superadmin", "admin"):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user


def resolve_office_scope(current_user: User, office_id: Optional[int] = None) -> Optional[int]:
    """
    Return the office the request is limited to, or None for every office.

    Secretaries are always pinned to their own office, whatever they ask for.
    """
    if current_user.role == "secretary":
        return current_user.office_id
    return office_id


def get_scoped_student(db: Session, student_id: int, current_user: User):
    query = db.query(Student).filter(Student.id == student_id)
    office_id = resolve_office_scope(current_user)
    if office_id is not None:
        query = query.filter(Student.office_id == office_id)
    student = query.first()
    if not student:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


def require_office(db: Session, current_user: User, office_id: Optional[int] = None) -> int:
    """Return the office a new record belongs to; secretaries always write to their own."""
    office_id = resolve_office_scope(current_user, office_id)
    if office_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="office_id is required")
    if not db.query(Office).filter(Office.id == office_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Office not found")
    return office_id


def get_scoped_record(db: Session, model, record_id: int, current_user: User, detail: str):
    """Load an office-owned record, answering 404 when it is missing or out of scope."""
    query = db.query(model).filter(model.id == record_id)
    office_id = resolve_office_scope(current_user)
    if office_id is not None:
        query = query.filter(model.office_id == office_id)
    record = query.first()
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return record
