"""Office (tenant) model for DriveDesk."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class Office(Base):
    __tablename__ = "offices"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=True)
    phone = Column(String(50), nullable=True)
    subscription_plan = Column(String(20), nullable=False, default="basic")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    users = relationship("User", back_populates="office")
    students = relationship("Student", back_populates="office")
    profile = relationship("OfficeProfile", back_populates="office", uselist=False, cascade="all, delete-orphan")
