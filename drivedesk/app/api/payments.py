"""Payment endpoints. Recording a payment runs the archival check for the student."""

from datetime import date
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.time import default_date
from drivedesk.app.crud.student_records import SqlAlchemyStudentRecords
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, get_scoped_student, resolve_office_scope
from drivedesk.app.models.payment import Payment
from drivedesk.app.models.student import Student
from drivedesk.app.models.user import User
from drivedesk.app.schemas.payment import PaymentCreate, PaymentRead
from drivedesk.app.services.archival import on_payment_recorded
from drivedesk.app.services.listing import apply_sorting

router = APIRouter(prefix="/payments", tags=["payments"])
logger = get_logger(__name__)


@router.post("/", response_model=PaymentRead, status_code=status.HTTP_201_CREATED)
async def record_payment(payment_in: PaymentCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    student = get_scoped_student(db, payment_in.student_id, current_user)
    payment = Payment(
        student_id=student.id,
        amount=payment_in.amount,
        payment_date=default_date(payment_in.payment_date),
        status=payment_in.status,
        method=payment_in.method,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    logger.info("payment_recorded", payment_id=payment.id, student_id=student.id, amount=str(payment.amount))

    on_payment_recorded(SqlAlchemyStudentRecords(db), student.id)
    db.refresh(payment)
    return payment


@router.get("/", response_model=List[PaymentRead])
async def list_payments(
    office_id: int | None = None,
    student_id: int | None = None,
    min_amount: Decimal | None = None,
    max_amount: Decimal | None = None,
    from_date: date | None = None,
    to_date: date | None = None,
    method: str | None = None,
    payment_status: str | None = None,
    skip: int = 0,
    limit: int = 50,
    sort_by: str = "payment_date",
    sort_order: str = "desc",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(Payment).join(Student).filter(Student.archived.is_(False))
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(Student.office_id == scope)

    if student_id is not None:
        query = query.filter(Payment.student_id == student_id)
    if method:
        query = query.filter(Payment.method == method)
    if payment_status:
        query = query.filter(Payment.status == payment_status)
    if min_amount is not None:
        query = query.filter(Payment.amount >= min_amount)
    if max_amount is not None:
        query = query.filter(Payment.amount <= max_amount)
    if from_date is not None:
        query = query.filter(Payment.payment_date >= from_date)
    if to_date is not None:
        query = query.filter(Payment.payment_date <= to_date)

    supported_sort_fields = {
        "payment_date": Payment.payment_date,
        "amount": Payment.amount,
        "id": Payment.id,
    }
    query = apply_sorting(query, supported_sort_fields, sort_by, sort_order)
    return query.offset(skip).limit(limit).all()
