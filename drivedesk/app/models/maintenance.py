from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class Maintenance(Base):
    __tablename__ = "maintenance_records"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False, index=True)
    maintenance_date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    cost = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String(20), nullable=False, default="scheduled")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    vehicle = relationship("Vehicle", back_populates="maintenance_records")
