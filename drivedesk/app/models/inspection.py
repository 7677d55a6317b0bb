from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class Inspection(Base):
    __tablename__ = "inspections"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False, index=True)
    inspection_date = Column(Date, nullable=False)
    inspector_name = Column(String, nullable=False)
    result = Column(String(20), nullable=False, default="pending")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    vehicle = relationship("Vehicle", back_populates="inspections")
