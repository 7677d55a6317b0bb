"""Exam endpoints. Recording an exam runs the archival check for the student."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.crud.student_records import SqlAlchemyStudentRecords
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, get_scoped_student, resolve_office_scope
from drivedesk.app.models.exam import Exam
from drivedesk.app.models.student import Student
from drivedesk.app.models.user import User
from drivedesk.app.schemas.exam import ExamCreate, ExamRead
from drivedesk.app.services.archival import on_exam_recorded
from drivedesk.app.services.listing import apply_sorting

router = APIRouter(prefix="/exams", tags=["exams"])
logger = get_logger(__name__)


@router.post("/", response_model=ExamRead, status_code=status.HTTP_201_CREATED)
async def record_exam(exam_in: ExamCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    student = get_scoped_student(db, exam_in.student_id, current_user)
    exam = Exam(**exam_in.model_dump())
    db.add(exam)
    db.commit()
    db.refresh(exam)
    logger.info("exam_recorded", exam_id=exam.id, student_id=student.id, exam_type=exam.exam_type, result=exam.result)

    on_exam_recorded(SqlAlchemyStudentRecords(db), student.id)
    db.refresh(exam)
    return exam


@router.get("/", response_model=list[ExamRead])
async def list_exams(
    office_id: int | None = None,
    student_id: int | None = None,
    exam_type: str | None = None,
    result: str | None = None,
    sort_by: str = "exam_date",
    sort_order: str = "desc",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(Exam).join(Student).filter(Student.archived.is_(False))
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(Student.office_id == scope)
    if student_id is not None:
        query = query.filter(Exam.student_id == student_id)
    if exam_type:
        query = query.filter(Exam.exam_type == exam_type)
    if result:
        query = query.filter(Exam.result == result)

    supported_sort_fields = {
        "exam_date": Exam.exam_date,
        "id": Exam.id,
    }
    return apply_sorting(query, supported_sort_fields, sort_by, sort_order).all()
