import os
from decimal import Decimal

from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.security import get_password_hash
from drivedesk.app.models.license_price import LicensePrice
from drivedesk.app.models.office import Office
from drivedesk.app.models.subscription_plan import SubscriptionPlan
from drivedesk.app.models.user import User

logger = get_logger(__name__)

DEFAULT_DEV_PASSWORD = "Secret123!"
DEFAULT_SUPERADMIN_EMAIL = "superadmin@drivedesk.example.com"
DEFAULT_ADMIN_EMAIL = "admin@drivedesk.example.com"
DEFAULT_OFFICES = [
    {"name": "Main Office - Downtown", "address": "123 Drive St", "phone": "123-456-7890", "subscription_plan": "enterprise"},
    {"name": "Westside Branch", "address": "456 West Ave", "phone": "987-654-3210", "subscription_plan": "basic"},
    {"name": "North End Academy", "address": "789 North Blvd", "phone": "555-123-4567", "subscription_plan": "business"},
]
DEFAULT_SUBSCRIPTION_PLANS = [
    {
        "code": "basic",
        "name": "Starter Pack",
        "price": Decimal("49"),
        "duration": "monthly",
        "features": ["1 Secretary Dashboard", "Manage up to 50 students", "Basic reporting", "Email support"],
    },
    {
        "code": "business",
        "name": "Growth Pack",
        "price": Decimal("99"),
        "duration": "monthly",
        "features": ["Up to 2 Secretary Dashboards", "Manage up to 200 students", "Advanced reporting & analytics", "Priority support"],
    },
    {
        "code": "enterprise",
        "name": "Pro Pack",
        "price": Decimal("199"),
        "duration": "monthly",
        "features": ["Unlimited Secretary Dashboards", "Multi-school management", "Dedicated account manager", "API access"],
    },
]
DEFAULT_LICENSE_PRICES = {
    "A": Decimal("600"),
    "A1": Decimal("550"),
    "B": Decimal("500"),
    "BE": Decimal("700"),
    "C1": Decimal("800"),
    "C1E": Decimal("950"),
    "C": Decimal("900"),
    "CE": Decimal("1100"),
    "D1": Decimal("1000"),
    "D1E": Decimal("1200"),
    "D": Decimal("1150"),
    "DE": Decimal("1300"),
}


def ensure_dev_data(db: Session) -> None:
    """
    Create a super admin, an admin, the default offices, the subscription plan
    catalogue and the license price table for local development when missing.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    created = False
    if not db.query(User).filter(User.email == DEFAULT_SUPERADMIN_EMAIL).first():
        db.add(
            User(
                email=DEFAULT_SUPERADMIN_EMAIL,
                full_name="Super Admin",
                hashed_password=get_password_hash(DEFAULT_DEV_PASSWORD),
                role="superadmin",
                is_active=True,
            )
        )
        created = True

    if not db.query(User).filter(User.email == DEFAULT_ADMIN_EMAIL).first():
        db.add(
            User(
                email=DEFAULT_ADMIN_EMAIL,
                full_name="School Admin",
                hashed_password=get_password_hash(DEFAULT_DEV_PASSWORD),
                role="admin",
                is_active=True,
            )
        )
        created = True

    if db.query(Office).count() == 0:
        for office in DEFAULT_OFFICES:
            db.add(Office(**office))
        created = True

    if db.query(SubscriptionPlan).count() == 0:
        for plan in DEFAULT_SUBSCRIPTION_PLANS:
            db.add(SubscriptionPlan(**plan))
        created = True

    if db.query(LicensePrice).count() == 0:
        for category, price in DEFAULT_LICENSE_PRICES.items():
            db.add(LicensePrice(category=category, price=price))
        created = True

    if created:
        db.commit()
        logger.info("dev_data_seeded")
