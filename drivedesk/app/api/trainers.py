"""Trainer (instructor) endpoints, including assigned vehicles and upcoming lessons."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.time import default_date
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, get_scoped_record, require_office, resolve_office_scope
from drivedesk.app.models.lesson import Lesson
from drivedesk.app.models.trainer import Trainer
from drivedesk.app.models.user import User
from drivedesk.app.models.vehicle import Vehicle
from drivedesk.app.schemas.lesson import LessonRead
from drivedesk.app.schemas.trainer import TrainerCreate, TrainerRead, TrainerUpdate
from drivedesk.app.services.listing import apply_sorting

router = APIRouter(prefix="/trainers", tags=["trainers"])
logger = get_logger(__name__)


def _office_vehicles(db: Session, office_id: int, vehicle_ids: List[int]) -> List[Vehicle]:
    if not vehicle_ids:
        return []
    vehicles = db.query(Vehicle).filter(Vehicle.id.in_(vehicle_ids), Vehicle.office_id == office_id).all()
    if len(vehicles) != len(set(vehicle_ids)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown vehicle ids for this office")
    return vehicles


@router.post("/", response_model=TrainerRead, status_code=status.HTTP_201_CREATED)
async def create_trainer(trainer_in: TrainerCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    office_id = require_office(db, current_user, trainer_in.office_id)
    data = trainer_in.model_dump(exclude={"office_id", "hire_date", "vehicle_ids"})
    trainer = Trainer(office_id=office_id, hire_date=default_date(trainer_in.hire_date), **data)
    trainer.vehicles = _office_vehicles(db, office_id, trainer_in.vehicle_ids)
    db.add(trainer)
    db.commit()
    db.refresh(trainer)
    logger.info("trainer_created", trainer_id=trainer.id, office_id=office_id)
    return trainer


@router.get("/", response_model=list[TrainerRead])
async def list_trainers(
    office_id: int | None = None,
    search: str | None = None,
    sort_by: str = "name",
    sort_order: str = "asc",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(Trainer)
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(Trainer.office_id == scope)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Trainer.name.ilike(pattern), Trainer.specialty.ilike(pattern)))

    supported_sort_fields = {
        "name": Trainer.name,
        "hire_date": Trainer.hire_date,
        "id": Trainer.id,
    }
    return apply_sorting(query, supported_sort_fields, sort_by, sort_order).all()


@router.get("/{trainer_id}", response_model=TrainerRead)
async def get_trainer(trainer_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_scoped_record(db, Trainer, trainer_id, current_user, "Trainer not found")


@router.put("/{trainer_id}", response_model=TrainerRead)
async def update_trainer(
    trainer_id: int,
    trainer_in: TrainerUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    trainer = get_scoped_record(db, Trainer, trainer_id, current_user, "Trainer not found")
    update_data = trainer_in.model_dump(exclude_unset=True)
    vehicle_ids = update_data.pop("vehicle_ids", None)
    for field, value in update_data.items():
        if value is not None:
            setattr(trainer, field, value)
    if vehicle_ids is not None:
        trainer.vehicles = _office_vehicles(db, trainer.office_id, vehicle_ids)
    db.commit()
    db.refresh(trainer)
    return trainer


@router.get("/{trainer_id}/lessons", response_model=list[LessonRead])
async def list_upcoming_lessons(trainer_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    trainer = get_scoped_record(db, Trainer, trainer_id, current_user, "Trainer not found")
    return (
        db.query(Lesson)
        .filter(Lesson.trainer_id == trainer.id, Lesson.status == "scheduled")
        .order_by(Lesson.lesson_date.asc(), Lesson.start_time.asc())
        .all()
    )
