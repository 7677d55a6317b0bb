from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from drivedesk.app.services.archival import has_passed_exams, on_exam_recorded, on_payment_recorded


class InMemoryStudentRecords:
    """StudentRecordStore backed by plain lists."""

    def __init__(self, prices=None):
        self.students = {}
        self.exams = []
        self.payments = []
        self.lessons = []
        self.notifications = []
        self.prices = dict(prices or {})

    def add_student(self, student_id=1, name="Alice Johnson", category="B", archived=False):
        student = SimpleNamespace(id=student_id, name=name, license_category=category, office_id=1, archived=archived)
        self.students[student_id] = student
        return student

    def add_exam(self, student_id, exam_type, result, exam_date):
        self.exams.append(
            SimpleNamespace(student_id=student_id, exam_type=exam_type, result=result, exam_date=date.fromisoformat(exam_date))
        )

    def add_payment(self, student_id, amount):
        self.payments.append(SimpleNamespace(student_id=student_id, amount=Decimal(amount)))

    def get_student(self, student_id):
        return self.students.get(student_id)

    def list_lessons(self, student_id):
        return [l for l in self.lessons if l.student_id == student_id]

    def list_exams(self, student_id):
        exams = [e for e in self.exams if e.student_id == student_id]
        return sorted(exams, key=lambda e: e.exam_date, reverse=True)

    def list_payments(self, student_id):
        return [p for p in self.payments if p.student_id == student_id]

    def get_category_price(self, category):
        return self.prices.get(category)

    def set_student_archived(self, student_id):
        self.students[student_id].archived = True

    def append_notification(self, notification):
        self.notifications.append(notification)
        return notification


@pytest.fixture
def store():
    records = InMemoryStudentRecords(prices={"B": Decimal("500")})
    records.add_student()
    return records


def _pass_both_exams(store, student_id=1):
    store.add_exam(student_id, "theory", "passed", "2024-01-10")
    store.add_exam(student_id, "practical", "passed", "2024-02-10")


def test_any_passed_theory_counts_even_after_later_failure():
    exams = [
        SimpleNamespace(exam_type="theory", result="failed", exam_date=date(2024, 2, 1)),
        SimpleNamespace(exam_type="theory", result="passed", exam_date=date(2024, 1, 1)),
    ]
    assert has_passed_exams(exams) == (True, False)


def test_pending_and_failed_do_not_count():
    exams = [
        SimpleNamespace(exam_type="theory", result="pending"),
        SimpleNamespace(exam_type="practical", result="failed"),
    ]
    assert has_passed_exams(exams) == (False, False)


def test_exam_with_full_payment_archives(store):
    store.add_payment(1, "500.00")
    _pass_both_exams(store)

    emitted = on_exam_recorded(store, 1)

    assert store.students[1].archived is True
    assert [n.notification_type for n in emitted] == ["completion", "completion"]
    assert emitted[0].message == "Alice Johnson has passed all required exams."
    assert emitted[1].message == "Alice Johnson's file has been automatically archived."


def test_exam_with_partial_payment_requests_balance(store):
    store.add_payment(1, "300.00")
    _pass_both_exams(store)

    emitted = on_exam_recorded(store, 1)

    assert store.students[1].archived is False
    payment_due = [n for n in emitted if n.notification_type == "payment_due"]
    assert len(payment_due) == 1
    assert "200.00" in payment_due[0].message
    assert payment_due[0].message == "Collect remaining 200.00 DH from Alice Johnson to archive their file."


def test_exam_without_both_passes_does_nothing(store):
    store.add_payment(1, "500.00")
    store.add_exam(1, "theory", "passed", "2024-01-10")
    store.add_exam(1, "practical", "pending", "2024-02-10")

    assert on_exam_recorded(store, 1) == []
    assert store.students[1].archived is False
    assert store.notifications == []


def test_payment_completing_balance_archives_once(store):
    _pass_both_exams(store)
    store.add_payment(1, "300.00")
    on_exam_recorded(store, 1)
    store.notifications.clear()

    store.add_payment(1, "200.00")
    emitted = on_payment_recorded(store, 1)

    assert store.students[1].archived is True
    assert len(emitted) == 1
    assert emitted[0].notification_type == "completion"
    assert emitted[0].message == "Alice Johnson's file has been archived after final payment."


def test_partial_payment_is_silent(store):
    _pass_both_exams(store)
    store.add_payment(1, "100.00")

    assert on_payment_recorded(store, 1) == []
    assert store.students[1].archived is False
    assert store.notifications == []


def test_payment_before_exams_does_not_archive(store):
    store.add_payment(1, "500.00")
    assert on_payment_recorded(store, 1) == []
    assert store.students[1].archived is False


def test_policy_is_idempotent_after_archival(store):
    store.add_payment(1, "500.00")
    _pass_both_exams(store)
    on_exam_recorded(store, 1)
    count = len(store.notifications)

    assert on_exam_recorded(store, 1) == []
    assert on_payment_recorded(store, 1) == []
    assert len(store.notifications) == count
    assert store.students[1].archived is True


def test_missing_price_defaults_to_zero():
    records = InMemoryStudentRecords()
    records.add_student(category="ZZ")
    _pass_both_exams(records)

    emitted = on_exam_recorded(records, 1)

    assert records.students[1].archived is True
    assert len(emitted) == 2


def test_unknown_student_is_ignored(store):
    assert on_exam_recorded(store, 99) == []
    assert on_payment_recorded(store, 99) == []
