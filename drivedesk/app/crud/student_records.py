"""Record store used by the progress and archival services.

The services only see the ``StudentRecordStore`` protocol, so they can run
against the database in production and against plain in-memory fakes in
tests.
"""

from decimal import Decimal
from typing import List, Optional, Protocol

from sqlalchemy.orm import Session

from drivedesk.app.core.time import utc_now
from drivedesk.app.models.exam import Exam
from drivedesk.app.models.lesson import Lesson
from drivedesk.app.models.license_price import LicensePrice
from drivedesk.app.models.notification import Notification
from drivedesk.app.models.payment import Payment
from drivedesk.app.models.student import Student
from drivedesk.app.schemas.notification import NotificationCreate


class StudentRecordStore(Protocol):
    def get_student(self, student_id: int): ...

    def list_lessons(self, student_id: int) -> list: ...

    def list_exams(self, student_id: int) -> list:
        """Exams for the student, newest first."""

    def list_payments(self, student_id: int) -> list: ...

    def get_category_price(self, category: str) -> Optional[Decimal]: ...

    def set_student_archived(self, student_id: int) -> None: ...

    def append_notification(self, notification: NotificationCreate): ...


class SqlAlchemyStudentRecords:
    def __init__(self, db: Session):
        self.db = db

    def get_student(self, student_id: int) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def list_lessons(self, student_id: int) -> List[Lesson]:
        return (
            self.db.query(Lesson)
            .filter(Lesson.student_id == student_id)
            .order_by(Lesson.lesson_date.desc(), Lesson.start_time.desc(), Lesson.id.desc())
            .all()
        )

    def list_exams(self, student_id: int) -> List[Exam]:
        return (
            self.db.query(Exam)
            .filter(Exam.student_id == student_id)
            .order_by(Exam.exam_date.desc(), Exam.id.desc())
            .all()
        )

    def list_payments(self, student_id: int) -> List[Payment]:
        return (
            self.db.query(Payment)
            .filter(Payment.student_id == student_id)
            .order_by(Payment.payment_date.desc(), Payment.id.desc())
            .all()
        )

    def get_category_price(self, category: str) -> Optional[Decimal]:
        entry = self.db.query(LicensePrice).filter(LicensePrice.category == category).first()
        if entry is None:
            return None
        return entry.price

    def set_student_archived(self, student_id: int) -> None:
        student = self.get_student(student_id)
        if student is None or student.archived:
            return
        student.archived = True
        student.archived_at = utc_now()
        self.db.commit()

    def append_notification(self, notification: NotificationCreate) -> Notification:
        obj = Notification(**notification.model_dump())
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj
