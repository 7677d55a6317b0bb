# DriveDesk backend entrypoint: driving school office dashboard API.

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from drivedesk.app.api import attendance
from drivedesk.app.api import charges
from drivedesk.app.api import dashboard
from drivedesk.app.api import exams
from drivedesk.app.api import lessons
from drivedesk.app.api import license_prices
from drivedesk.app.api import login
from drivedesk.app.api import notifications
from drivedesk.app.api import offices
from drivedesk.app.api import payments
from drivedesk.app.api import school_profile
from drivedesk.app.api import staff
from drivedesk.app.api import students
from drivedesk.app.api import subscriptions
from drivedesk.app.api import trainers
from drivedesk.app.api import vehicles
from drivedesk.app.core.dev_seed import ensure_dev_data
from drivedesk.app.core.logging import setup_logging
from drivedesk.app.core.settings import get_settings
from drivedesk.app.db.base import Base
from drivedesk.app.db.session import SessionLocal, engine

settings = get_settings()
setup_logging(settings)

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(login.router)
app.include_router(offices.router)
app.include_router(students.router)
app.include_router(trainers.router)
app.include_router(vehicles.router)
app.include_router(staff.router)
app.include_router(lessons.router)
app.include_router(exams.router)
app.include_router(payments.router)
app.include_router(license_prices.router)
app.include_router(charges.router)
app.include_router(attendance.router)
app.include_router(school_profile.router)
app.include_router(subscriptions.router)
app.include_router(notifications.router)
app.include_router(dashboard.router)


@app.get("/")
def read_root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def prepare_database():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_dev_data(db)
    finally:
        db.close()
