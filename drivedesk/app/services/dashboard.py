"""Dashboard statistics for office staff and the super-admin view."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from drivedesk.app.models.charge import Charge
from drivedesk.app.models.lesson import Lesson
from drivedesk.app.models.notification import Notification
from drivedesk.app.models.office import Office
from drivedesk.app.models.payment import Payment
from drivedesk.app.models.staff_member import StaffMember
from drivedesk.app.models.student import Student
from drivedesk.app.models.trainer import Trainer
from drivedesk.app.models.vehicle import Vehicle
from drivedesk.app.schemas.dashboard import DashboardStats, SuperAdminStats

SUBSCRIPTION_PLANS = ("basic", "business", "enterprise")


def _money(total) -> Decimal:
    return Decimal(str(total)).quantize(Decimal("0.01"))


def _paid_revenue(query) -> Decimal:
    return _money(query.with_entities(func.coalesce(func.sum(Payment.amount), 0)).filter(Payment.status == "paid").scalar())


def _charges_total(query) -> Decimal:
    return _money(query.with_entities(func.coalesce(func.sum(Charge.amount), 0)).scalar())


def get_dashboard_stats(db: Session, *, office_id: Optional[int]) -> DashboardStats:
    students = db.query(Student)
    if office_id is not None:
        students = students.filter(Student.office_id == office_id)

    total_students = students.filter(Student.archived.is_(False)).count()
    archived_students = students.filter(Student.archived.is_(True)).count()

    # Lessons and revenue follow the non-archived students, as on the office dashboard.
    lessons = db.query(Lesson).join(Student).filter(Student.archived.is_(False), Lesson.status == "scheduled")
    payments = db.query(Payment).join(Student).filter(Student.archived.is_(False))
    notifications = db.query(Notification).filter(Notification.read.is_(False))
    cars = db.query(Vehicle).filter(Vehicle.vehicle_type == "car", Vehicle.status == "available")
    charges = db.query(Charge)
    staff = db.query(StaffMember)
    if office_id is not None:
        lessons = lessons.filter(Student.office_id == office_id)
        payments = payments.filter(Student.office_id == office_id)
        notifications = notifications.filter(Notification.office_id == office_id)
        cars = cars.filter(Vehicle.office_id == office_id)
        charges = charges.filter(Charge.office_id == office_id)
        staff = staff.filter(StaffMember.office_id == office_id)

    return DashboardStats(
        total_students=total_students,
        archived_students=archived_students,
        active_lessons=lessons.count(),
        revenue=_paid_revenue(payments),
        unread_notifications=notifications.count(),
        available_cars=cars.count(),
        total_charges=_charges_total(charges),
        staff_charges=_charges_total(charges.filter(Charge.category == "salary")),
        total_staff=staff.count(),
        present_staff=staff.filter(StaffMember.status == "present").count(),
        absent_staff=staff.filter(StaffMember.status == "absent").count(),
    )


def get_superadmin_stats(db: Session) -> SuperAdminStats:
    plan_counts = dict(
        db.query(Office.subscription_plan, func.count(Office.id)).group_by(Office.subscription_plan).all()
    )
    return SuperAdminStats(
        total_offices=db.query(Office).count(),
        total_students=db.query(Student).count(),
        total_trainers=db.query(Trainer).count(),
        total_revenue=_paid_revenue(db.query(Payment)),
        subscriptions={plan: plan_counts.get(plan, 0) for plan in SUBSCRIPTION_PLANS},
    )
