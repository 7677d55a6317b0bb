"""Daily attendance sheet endpoints."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, resolve_office_scope
from drivedesk.app.models.user import User
from drivedesk.app.schemas.attendance import AttendanceMark, AttendanceRead
from drivedesk.app.services.attendance import list_attendance, mark_attendance

router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.get("/", response_model=list[AttendanceRead])
async def get_attendance(
    attendance_date: date,
    office_id: int | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_attendance(db, attendance_date, resolve_office_scope(current_user, office_id))


@router.post("/", response_model=list[AttendanceRead])
async def post_attendance(
    marks: List[AttendanceMark],
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return mark_attendance(db, marks, resolve_office_scope(current_user))
