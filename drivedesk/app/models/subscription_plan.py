from sqlalchemy import JSON, Column, Integer, Numeric, String

from drivedesk.app.db.base_class import Base


class SubscriptionPlan(Base):
    __tablename__ = "subscription_plans"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(20), nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    duration = Column(String(20), nullable=False, default="monthly")
    features = Column(JSON, nullable=False, default=list)
