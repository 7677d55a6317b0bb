"""Exam model: one theory or practical attempt for a student."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class Exam(Base):
    __tablename__ = "exams"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    exam_date = Column(Date, nullable=False)
    exam_type = Column(String(20), nullable=False)
    result = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime, nullable=False, default=utc_now)

    student = relationship("Student", back_populates="exams")
