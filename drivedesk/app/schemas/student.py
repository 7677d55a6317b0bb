"""Student schemas for DriveDesk."""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

StudentStatus = Literal["active", "inactive", "completed"]


class StudentBase(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    join_date: Optional[date] = None
    status: StudentStatus = "active"
    license_category: str


class StudentCreate(StudentBase):
    office_id: Optional[int] = None


class StudentUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[StudentStatus] = None
    license_category: Optional[str] = None


class StudentRead(StudentBase):
    id: int
    join_date: date
    office_id: int
    archived: bool
    archived_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StudentCategoryGroup(BaseModel):
    category: str
    name: str
    student_count: int
    student_ids: List[int]
