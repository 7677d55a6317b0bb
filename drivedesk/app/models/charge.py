"""Office expense (charge) model."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String

from drivedesk.app.db.base_class import Base
from drivedesk.app.core.time import utc_now


class Charge(Base):
    __tablename__ = "charges"

    id = Column(Integer, primary_key=True, index=True)
    office_id = Column(Integer, ForeignKey("offices.id"), nullable=False, index=True)
    category = Column(String(30), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    beneficiary = Column(String, nullable=False)
    charge_date = Column(Date, nullable=False)
    invoice_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
