"""Driving lesson model for DriveDesk."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Time
from sqlalchemy.orm import relationship

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class Lesson(Base):
    __tablename__ = "lessons"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    trainer_id = Column(Integer, ForeignKey("trainers.id"), nullable=True, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=True, index=True)
    lesson_date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    status = Column(String(20), nullable=False, default="scheduled")
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    student = relationship("Student", back_populates="lessons")
    trainer = relationship("Trainer", back_populates="lessons")
    vehicle = relationship("Vehicle")

    @property
    def student_name(self):
        return self.student.name if self.student else None

    @property
    def trainer_name(self):
        return self.trainer.name if self.trainer else None

    @property
    def vehicle_name(self):
        return self.vehicle.display_name if self.vehicle else None
