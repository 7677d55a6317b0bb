"""Attendance sheet for an office day: one record per student or staff member."""

from typing import Iterable, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.time import utc_today
from drivedesk.app.models.attendance import AttendanceRecord
from drivedesk.app.models.staff_member import StaffMember
from drivedesk.app.models.student import Student
from drivedesk.app.schemas.attendance import AttendanceMark

logger = get_logger(__name__)

ENTITY_MODELS = {"student": Student, "staff": StaffMember}


def _load_entity(db: Session, mark: AttendanceMark, office_id: Optional[int]):
    model = ENTITY_MODELS[mark.entity_type]
    query = db.query(model).filter(model.id == mark.entity_id)
    if office_id is not None:
        query = query.filter(model.office_id == office_id)
    entity = query.first()
    if entity is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{mark.entity_type.capitalize()} {mark.entity_id} not found",
        )
    return entity


def mark_attendance(db: Session, marks: Iterable[AttendanceMark], office_id: Optional[int]) -> List[AttendanceRecord]:
    """
    Create or update one attendance record per (entity, day) and commit.

    Marking a staff member for today also updates their current presence
    status, which feeds the office dashboard.
    """
    records = {}
    today = utc_today()
    for mark in marks:
        entity = _load_entity(db, mark, office_id)
        key = (mark.entity_type, mark.entity_id, mark.attendance_date)
        record = records.get(key) or (
            db.query(AttendanceRecord)
            .filter(
                AttendanceRecord.entity_type == mark.entity_type,
                AttendanceRecord.entity_id == mark.entity_id,
                AttendanceRecord.attendance_date == mark.attendance_date,
            )
            .first()
        )
        if record is None:
            record = AttendanceRecord(
                office_id=entity.office_id,
                entity_type=mark.entity_type,
                entity_id=mark.entity_id,
                attendance_date=mark.attendance_date,
            )
            db.add(record)
        record.status = mark.status
        record.notes = mark.notes
        if mark.entity_type == "staff" and mark.attendance_date == today:
            entity.status = mark.status
        records[key] = record

    db.commit()
    for record in records.values():
        db.refresh(record)
    logger.info("attendance_marked", office_id=office_id, records=len(records))
    return list(records.values())


def list_attendance(db: Session, attendance_date, office_id: Optional[int]) -> List[AttendanceRecord]:
    query = db.query(AttendanceRecord).filter(AttendanceRecord.attendance_date == attendance_date)
    if office_id is not None:
        query = query.filter(AttendanceRecord.office_id == office_id)
    return query.order_by(AttendanceRecord.entity_type.asc(), AttendanceRecord.entity_id.asc()).all()
