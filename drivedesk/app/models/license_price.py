from sqlalchemy import Column, DateTime, Integer, Numeric, String

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class LicensePrice(Base):
    __tablename__ = "license_prices"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String(10), nullable=False, unique=True, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)
