from datetime import date, time
from decimal import Decimal

import pytest

from drivedesk.app.crud.student_records import SqlAlchemyStudentRecords
from drivedesk.app.db.base import Base
from drivedesk.app.db.session import SessionLocal, engine
from drivedesk.app.models.exam import Exam
from drivedesk.app.models.lesson import Lesson
from drivedesk.app.models.license_price import LicensePrice
from drivedesk.app.models.notification import Notification
from drivedesk.app.models.office import Office
from drivedesk.app.models.payment import Payment
from drivedesk.app.models.student import Student
from drivedesk.app.schemas.notification import NotificationCreate


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def _create_student(db):
    office = Office(name="Main Office", subscription_plan="enterprise")
    db.add(office)
    db.commit()
    db.refresh(office)
    student = Student(office_id=office.id, name="Alice Johnson", join_date=date(2024, 1, 1), license_category="B")
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


def test_exams_are_listed_newest_first():
    db = SessionLocal()
    try:
        student = _create_student(db)
        db.add_all(
            [
                Exam(student_id=student.id, exam_date=date(2024, 1, 1), exam_type="theory", result="passed"),
                Exam(student_id=student.id, exam_date=date(2024, 3, 1), exam_type="theory", result="pending"),
                Exam(student_id=student.id, exam_date=date(2024, 2, 1), exam_type="theory", result="failed"),
            ]
        )
        db.commit()

        exams = SqlAlchemyStudentRecords(db).list_exams(student.id)
        assert [e.exam_date for e in exams] == [date(2024, 3, 1), date(2024, 2, 1), date(2024, 1, 1)]
    finally:
        db.close()


def test_lessons_and_payments_are_scoped_to_student():
    db = SessionLocal()
    try:
        student = _create_student(db)
        other = Student(office_id=student.office_id, name="Bob Smith", join_date=date(2024, 1, 1), license_category="A")
        db.add(other)
        db.commit()
        db.add_all(
            [
                Lesson(student_id=student.id, lesson_date=date(2024, 1, 5), start_time=time(10), end_time=time(11), status="completed"),
                Lesson(student_id=other.id, lesson_date=date(2024, 1, 6), start_time=time(10), end_time=time(11)),
                Payment(student_id=student.id, amount=Decimal("120.00"), payment_date=date(2024, 1, 2)),
                Payment(student_id=other.id, amount=Decimal("80.00"), payment_date=date(2024, 1, 2)),
            ]
        )
        db.commit()

        store = SqlAlchemyStudentRecords(db)
        assert len(store.list_lessons(student.id)) == 1
        payments = store.list_payments(student.id)
        assert [p.amount for p in payments] == [Decimal("120.00")]
    finally:
        db.close()


def test_category_price_lookup():
    db = SessionLocal()
    try:
        db.add(LicensePrice(category="B", price=Decimal("500.00")))
        db.commit()
        store = SqlAlchemyStudentRecords(db)
        assert store.get_category_price("B") == Decimal("500.00")
        assert store.get_category_price("CE") is None
    finally:
        db.close()


def test_set_student_archived_is_idempotent():
    db = SessionLocal()
    try:
        student = _create_student(db)
        store = SqlAlchemyStudentRecords(db)
        store.set_student_archived(student.id)
        db.refresh(student)
        first_archived_at = student.archived_at
        assert student.archived is True
        assert first_archived_at is not None

        store.set_student_archived(student.id)
        db.refresh(student)
        assert student.archived_at == first_archived_at
    finally:
        db.close()


def test_append_notification_persists_unread():
    db = SessionLocal()
    try:
        student = _create_student(db)
        store = SqlAlchemyStudentRecords(db)
        created = store.append_notification(
            NotificationCreate(
                student_id=student.id,
                student_name=student.name,
                office_id=student.office_id,
                message="Alice Johnson has passed all required exams.",
                notification_type="completion",
            )
        )
        assert created.id is not None
        assert created.read is False
        assert db.query(Notification).count() == 1
    finally:
        db.close()
