from datetime import date, time
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator

LessonStatus = Literal["scheduled", "completed", "cancelled"]


class LessonBase(BaseModel):
    student_id: int
    lesson_date: date
    start_time: time
    end_time: time
    status: LessonStatus = "scheduled"

    @model_validator(mode="after")
    def check_times(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class LessonCreate(LessonBase):
    trainer_id: int
    vehicle_id: int


class LessonUpdate(BaseModel):
    status: LessonStatus


class LessonRead(LessonBase):
    id: int
    trainer_id: Optional[int] = None
    vehicle_id: Optional[int] = None
    student_name: Optional[str] = None
    trainer_name: Optional[str] = None
    vehicle_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
