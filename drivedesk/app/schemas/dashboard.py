from decimal import Decimal
from typing import Dict

from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_students: int
    archived_students: int
    active_lessons: int
    revenue: Decimal
    unread_notifications: int
    available_cars: int
    total_charges: Decimal
    staff_charges: Decimal
    total_staff: int
    present_staff: int
    absent_staff: int


class SuperAdminStats(BaseModel):
    total_offices: int
    total_students: int
    total_trainers: int
    total_revenue: Decimal
    subscriptions: Dict[str, int]
