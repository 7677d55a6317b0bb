"""Fleet vehicle model: cars, trucks, buses and motorcycles share one table."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    office_id = Column(Integer, ForeignKey("offices.id"), nullable=False, index=True)
    vehicle_type = Column(String(20), nullable=False, index=True)
    make = Column(String, nullable=False)
    model = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    license_plate = Column(String(20), nullable=False, unique=True, index=True)
    status = Column(String(20), nullable=False, default="available")
    # Type specific columns; only the one matching vehicle_type is filled.
    truck_kind = Column(String(20), nullable=True)
    capacity = Column(Integer, nullable=True)
    engine_displacement = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    maintenance_records = relationship("Maintenance", back_populates="vehicle", cascade="all, delete-orphan")
    inspections = relationship("Inspection", back_populates="vehicle", cascade="all, delete-orphan")
    trainers = relationship("Trainer", secondary="trainer_vehicles", back_populates="vehicles")

    @property
    def display_name(self) -> str:
        return f"{self.make} {self.model}"
