"""Student endpoints for DriveDesk."""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.time import default_date
from drivedesk.app.crud.student_records import SqlAlchemyStudentRecords
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, get_scoped_student, require_office, resolve_office_scope
from drivedesk.app.models.student import Student
from drivedesk.app.models.user import User
from drivedesk.app.schemas.license_price import normalize_category
from drivedesk.app.schemas.progress import StudentProgress
from drivedesk.app.schemas.student import StudentCategoryGroup, StudentCreate, StudentRead, StudentUpdate
from drivedesk.app.services.archival import category_price, total_paid
from drivedesk.app.services.listing import apply_sorting, group_students_by_category
from drivedesk.app.services.progress import TOTAL_LESSONS_TARGET, compute_progress

router = APIRouter(prefix="/students", tags=["students"])
logger = get_logger(__name__)


def _scoped_students(db: Session, current_user: User, office_id: Optional[int], include_archived: bool):
    query = db.query(Student)
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(Student.office_id == scope)
    if not include_archived:
        query = query.filter(Student.archived.is_(False))
    return query


@router.post("/", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
async def create_student(student_in: StudentCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    office_id = require_office(db, current_user, student_in.office_id)

    student = Student(
        office_id=office_id,
        name=student_in.name,
        email=student_in.email,
        phone=student_in.phone,
        join_date=default_date(student_in.join_date),
        status=student_in.status,
        license_category=normalize_category(student_in.license_category),
        archived=False,
    )
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info("student_enrolled", student_id=student.id, office_id=office_id)
    return student


@router.get("/", response_model=list[StudentRead])
async def list_students(
    office_id: int | None = None,
    include_archived: bool = False,
    archived_only: bool = False,
    search: str | None = None,
    status_filter: str | None = None,
    license_category: str | None = None,
    skip: int = 0,
    limit: int = 100,
    sort_by: str = "name",
    sort_order: str = "asc",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = _scoped_students(db, current_user, office_id, include_archived or archived_only)
    if archived_only:
        query = query.filter(Student.archived.is_(True))
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Student.name.ilike(pattern), Student.email.ilike(pattern)))
    if status_filter:
        query = query.filter(Student.status == status_filter)
    if license_category:
        query = query.filter(Student.license_category == normalize_category(license_category))

    supported_sort_fields = {
        "name": Student.name,
        "join_date": Student.join_date,
        "id": Student.id,
    }
    query = apply_sorting(query, supported_sort_fields, sort_by, sort_order)
    return query.offset(skip).limit(limit).all()


@router.get("/categories", response_model=list[StudentCategoryGroup])
async def list_student_categories(
    office_id: int | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    students = _scoped_students(db, current_user, office_id, include_archived=False).order_by(Student.id.asc()).all()
    return group_students_by_category(students)


@router.get("/{student_id}", response_model=StudentRead)
async def get_student(student_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_scoped_student(db, student_id, current_user)


@router.put("/{student_id}", response_model=StudentRead)
async def update_student(student_id: int, student_in: StudentUpdate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    student = get_scoped_student(db, student_id, current_user)
    update_data = student_in.model_dump(exclude_unset=True)
    if update_data.get("license_category"):
        update_data["license_category"] = normalize_category(update_data["license_category"])
    for field, value in update_data.items():
        if value is not None:
            setattr(student, field, value)
    db.commit()
    db.refresh(student)
    return student


@router.get("/{student_id}/progress", response_model=StudentProgress)
async def get_student_progress(student_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    student = get_scoped_student(db, student_id, current_user)
    store = SqlAlchemyStudentRecords(db)
    lessons = store.list_lessons(student.id)
    exams = store.list_exams(student.id)

    price = category_price(store, student.license_category)
    paid = total_paid(store.list_payments(student.id))
    remaining = price - paid
    if remaining < Decimal("0.00"):
        remaining = Decimal("0.00")

    return StudentProgress(
        student_id=student.id,
        archived=student.archived,
        progress=compute_progress(lessons, exams),
        lessons_target=TOTAL_LESSONS_TARGET,
        category_price=price,
        total_paid=paid,
        remaining_balance=remaining,
        lessons=lessons,
        exams=exams,
    )
