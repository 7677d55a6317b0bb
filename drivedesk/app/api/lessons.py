"""Lesson scheduling endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, get_scoped_record, get_scoped_student, resolve_office_scope
from drivedesk.app.models.lesson import Lesson
from drivedesk.app.models.student import Student
from drivedesk.app.models.trainer import Trainer
from drivedesk.app.models.user import User
from drivedesk.app.models.vehicle import Vehicle
from drivedesk.app.schemas.lesson import LessonCreate, LessonRead, LessonUpdate
from drivedesk.app.services.listing import apply_sorting

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.post("/", response_model=LessonRead, status_code=status.HTTP_201_CREATED)
async def create_lesson(lesson_in: LessonCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    student = get_scoped_student(db, lesson_in.student_id, current_user)
    trainer = get_scoped_record(db, Trainer, lesson_in.trainer_id, current_user, "Trainer not found")
    vehicle = get_scoped_record(db, Vehicle, lesson_in.vehicle_id, current_user, "Vehicle not found")
    if trainer.office_id != student.office_id or vehicle.office_id != student.office_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Trainer and vehicle must belong to the student's office")
    if vehicle.status == "maintenance":
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Vehicle is under maintenance")
    lesson = Lesson(**lesson_in.model_dump())
    db.add(lesson)
    db.commit()
    db.refresh(lesson)
    return lesson


@router.get("/", response_model=list[LessonRead])
async def list_lessons(
    office_id: int | None = None,
    student_id: int | None = None,
    trainer_id: int | None = None,
    vehicle_id: int | None = None,
    lesson_status: str | None = None,
    from_date: date | None = None,
    to_date: date | None = None,
    sort_by: str = "lesson_date",
    sort_order: str = "desc",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(Lesson).join(Student).filter(Student.archived.is_(False))
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(Student.office_id == scope)
    if student_id is not None:
        query = query.filter(Lesson.student_id == student_id)
    if trainer_id is not None:
        query = query.filter(Lesson.trainer_id == trainer_id)
    if vehicle_id is not None:
        query = query.filter(Lesson.vehicle_id == vehicle_id)
    if lesson_status:
        query = query.filter(Lesson.status == lesson_status)
    if from_date is not None:
        query = query.filter(Lesson.lesson_date >= from_date)
    if to_date is not None:
        query = query.filter(Lesson.lesson_date <= to_date)

    supported_sort_fields = {
        "lesson_date": Lesson.lesson_date,
        "id": Lesson.id,
    }
    return apply_sorting(query, supported_sort_fields, sort_by, sort_order).all()


@router.patch("/{lesson_id}", response_model=LessonRead)
async def update_lesson_status(
    lesson_id: int,
    lesson_in: LessonUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    lesson = db.query(Lesson).filter(Lesson.id == lesson_id).first()
    if not lesson:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found")
    try:
        get_scoped_student(db, lesson.student_id, current_user)
    except HTTPException:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found")
    if lesson.status == "completed" and lesson_in.status != "completed":
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Completed lessons cannot be changed")
    lesson.status = lesson_in.status
    db.commit()
    db.refresh(lesson)
    return lesson
