from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict

ExamType = Literal["theory", "practical"]
ExamResult = Literal["passed", "failed", "pending"]


class ExamCreate(BaseModel):
    student_id: int
    exam_date: date
    exam_type: ExamType
    result: ExamResult = "pending"


class ExamRead(ExamCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
