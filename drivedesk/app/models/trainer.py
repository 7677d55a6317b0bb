"""Trainer (driving instructor) model and the trainer/vehicle assignment table."""

from sqlalchemy import JSON, Column, Date, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now

trainer_vehicles = Table(
    "trainer_vehicles",
    Base.metadata,
    Column("trainer_id", Integer, ForeignKey("trainers.id"), primary_key=True),
    Column("vehicle_id", Integer, ForeignKey("vehicles.id"), primary_key=True),
)


class Trainer(Base):
    __tablename__ = "trainers"

    id = Column(Integer, primary_key=True, index=True)
    office_id = Column(Integer, ForeignKey("offices.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String(50), nullable=True)
    specialty = Column(String, nullable=True)
    hire_date = Column(Date, nullable=False)
    license_d_date = Column(Date, nullable=True)
    cin = Column(String(30), nullable=True)
    license_types = Column(JSON, nullable=False, default=list)
    picture_url = Column(String, nullable=True)
    diploma_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    vehicles = relationship("Vehicle", secondary=trainer_vehicles, back_populates="trainers", order_by="Vehicle.id")
    lessons = relationship("Lesson", back_populates="trainer")

    @property
    def vehicle_ids(self) -> list[int]:
        return [vehicle.id for vehicle in self.vehicles]
