"""Office staff (non-teaching employees) model."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class StaffMember(Base):
    __tablename__ = "staff_members"

    id = Column(Integer, primary_key=True, index=True)
    office_id = Column(Integer, ForeignKey("offices.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String(50), nullable=True)
    whatsapp = Column(String(50), nullable=True)
    cin = Column(String(30), nullable=True)
    address = Column(String, nullable=True)
    hire_date = Column(Date, nullable=False)
    salary_type = Column(String(20), nullable=False, default="monthly")
    salary_amount = Column(Numeric(10, 2), nullable=False, default=0)
    picture_url = Column(String, nullable=True)
    status = Column(String(20), nullable=False, default="present")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
