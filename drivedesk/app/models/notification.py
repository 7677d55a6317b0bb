"""Notification model for the office notification panel."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from drivedesk.app.db.base_class import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    office_id = Column(Integer, ForeignKey("offices.id"), nullable=True, index=True)
    student_name = Column(String, nullable=False)
    message = Column(String, nullable=False)
    notification_type = Column(String(20), nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    student = relationship("Student", back_populates="notifications")
