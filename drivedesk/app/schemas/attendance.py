from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

AttendanceEntity = Literal["student", "staff"]
AttendanceStatus = Literal["present", "absent"]


class AttendanceMark(BaseModel):
    entity_type: AttendanceEntity
    entity_id: int
    attendance_date: date
    status: AttendanceStatus
    notes: Optional[str] = None


class AttendanceRead(AttendanceMark):
    id: int
    office_id: int

    model_config = ConfigDict(from_attributes=True)
