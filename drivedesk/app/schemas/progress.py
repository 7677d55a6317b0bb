"""Progress schemas for student course tracking."""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict

from drivedesk.app.schemas.exam import ExamRead
from drivedesk.app.schemas.lesson import LessonRead


class ProgressResult(BaseModel):
    percent: int
    completed_lessons: int
    theory_status: str
    practical_status: str


class StudentProgress(BaseModel):
    student_id: int
    archived: bool
    progress: ProgressResult
    lessons_target: int
    category_price: Decimal
    total_paid: Decimal
    remaining_balance: Decimal
    lessons: List[LessonRead]
    exams: List[ExamRead]

    model_config = ConfigDict(from_attributes=True)
