"""Automatic archival of students who finished their course.

A student is archived once they have passed a theory exam and a practical
exam and their payments cover the price of their license category. The check
runs right after an exam or a payment is recorded.

Exam checks use "any passed attempt" semantics: a later failed attempt does
not undo an earlier pass. Progress scoring in ``services.progress`` looks at
the latest decided attempt instead; both behaviors are kept as they are.
"""

from decimal import Decimal
from typing import Iterable, List, Tuple

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.settings import get_settings
from drivedesk.app.services.notifications import emit_notification

logger = get_logger(__name__)


def has_passed_exams(exams: Iterable) -> Tuple[bool, bool]:
    """Return ``(has_passed_theory, has_passed_practical)``."""
    passed_types = {exam.exam_type for exam in exams if exam.result == "passed"}
    return "theory" in passed_types, "practical" in passed_types


def total_paid(payments: Iterable) -> Decimal:
    return sum((Decimal(str(p.amount)) for p in payments if p.amount is not None), Decimal("0.00"))


def category_price(store, category: str) -> Decimal:
    price = store.get_category_price(category)
    if price is None:
        return Decimal("0.00")
    return Decimal(str(price))


def _archive(store, student, message: str) -> list:
    store.set_student_archived(student.id)
    logger.info("student_archived", student_id=student.id, office_id=getattr(student, "office_id", None))
    return [emit_notification(store, student, message, "completion")]


def _eligible_student(store, student_id: int):
    student = store.get_student(student_id)
    if student is None or student.archived:
        return None
    theory, practical = has_passed_exams(store.list_exams(student_id))
    if not (theory and practical):
        return None
    return student


def on_exam_recorded(store, student_id: int) -> List:
    """Run the archival check after an exam was stored; return new notifications."""
    student = _eligible_student(store, student_id)
    if student is None:
        return []

    notifications = [
        emit_notification(store, student, f"{student.name} has passed all required exams.", "completion")
    ]

    price = category_price(store, student.license_category)
    paid = total_paid(store.list_payments(student_id))
    remaining = price - paid

    if remaining > 0:
        currency = get_settings().currency
        logger.info("student_payment_due", student_id=student.id, remaining=str(remaining))
        notifications.append(
            emit_notification(
                store,
                student,
                f"Collect remaining {remaining:.2f} {currency} from {student.name} to archive their file.",
                "payment_due",
            )
        )
        return notifications

    notifications.extend(_archive(store, student, f"{student.name}'s file has been automatically archived."))
    return notifications


def on_payment_recorded(store, student_id: int) -> List:
    """Run the archival check after a payment was stored; return new notifications."""
    student = _eligible_student(store, student_id)
    if student is None:
        return []

    price = category_price(store, student.license_category)
    paid = total_paid(store.list_payments(student_id))
    if paid < price:
        return []

    return _archive(store, student, f"{student.name}'s file has been archived after final payment.")
