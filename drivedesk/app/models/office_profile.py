"""Public-facing school profile shown on an office's documents and settings page."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class OfficeProfile(Base):
    __tablename__ = "office_profiles"

    id = Column(Integer, primary_key=True, index=True)
    office_id = Column(Integer, ForeignKey("offices.id"), nullable=False, unique=True)
    name = Column(String, nullable=False)
    logo_url = Column(String, nullable=True)
    target_line = Column(String, nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String, nullable=True)
    website = Column(String, nullable=True)
    address = Column(String, nullable=True)
    country = Column(String, nullable=True)
    admin_name = Column(String, nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    office = relationship("Office", back_populates="profile")
