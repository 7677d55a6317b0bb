"""Fleet endpoints: vehicles of every type, their maintenance and inspections."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, get_scoped_record, require_office, resolve_office_scope
from drivedesk.app.models.inspection import Inspection
from drivedesk.app.models.maintenance import Maintenance
from drivedesk.app.models.user import User
from drivedesk.app.models.vehicle import Vehicle
from drivedesk.app.schemas.vehicle import (
    InspectionCreate,
    InspectionRead,
    MaintenanceCreate,
    MaintenanceRead,
    MaintenanceUpdate,
    VehicleCreate,
    VehicleRead,
    VehicleUpdate,
)
from drivedesk.app.services.fleet import sync_vehicle_status
from drivedesk.app.services.listing import apply_sorting

router = APIRouter(prefix="/vehicles", tags=["vehicles"])
logger = get_logger(__name__)


def _ensure_plate_free(db: Session, license_plate: str, vehicle_id: int | None = None) -> None:
    query = db.query(Vehicle).filter(Vehicle.license_plate == license_plate)
    if vehicle_id is not None:
        query = query.filter(Vehicle.id != vehicle_id)
    if query.first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="License plate already registered")


@router.post("/", response_model=VehicleRead, status_code=status.HTTP_201_CREATED)
async def create_vehicle(vehicle_in: VehicleCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    office_id = require_office(db, current_user, vehicle_in.office_id)
    license_plate = vehicle_in.license_plate.strip().upper()
    _ensure_plate_free(db, license_plate)
    data = vehicle_in.model_dump(exclude={"office_id", "license_plate"})
    vehicle = Vehicle(office_id=office_id, license_plate=license_plate, **data)
    db.add(vehicle)
    db.commit()
    db.refresh(vehicle)
    logger.info("vehicle_created", vehicle_id=vehicle.id, vehicle_type=vehicle.vehicle_type, office_id=office_id)
    return vehicle


@router.get("/", response_model=list[VehicleRead])
async def list_vehicles(
    office_id: int | None = None,
    vehicle_type: str | None = None,
    vehicle_status: str | None = None,
    sort_by: str = "id",
    sort_order: str = "asc",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(Vehicle)
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(Vehicle.office_id == scope)
    if vehicle_type:
        query = query.filter(Vehicle.vehicle_type == vehicle_type)
    if vehicle_status:
        query = query.filter(Vehicle.status == vehicle_status)

    supported_sort_fields = {
        "id": Vehicle.id,
        "make": Vehicle.make,
        "year": Vehicle.year,
        "license_plate": Vehicle.license_plate,
    }
    return apply_sorting(query, supported_sort_fields, sort_by, sort_order).all()


@router.get("/maintenance", response_model=list[MaintenanceRead])
async def list_all_maintenance(
    office_id: int | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(Maintenance).join(Vehicle)
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(Vehicle.office_id == scope)
    return query.order_by(Maintenance.maintenance_date.desc(), Maintenance.id.desc()).all()


@router.patch("/maintenance/{maintenance_id}", response_model=MaintenanceRead)
async def update_maintenance_status(
    maintenance_id: int,
    maintenance_in: MaintenanceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(Maintenance).join(Vehicle).filter(Maintenance.id == maintenance_id)
    scope = resolve_office_scope(current_user)
    if scope is not None:
        query = query.filter(Vehicle.office_id == scope)
    maintenance = query.first()
    if not maintenance:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Maintenance record not found")
    maintenance.status = maintenance_in.status
    sync_vehicle_status(db, maintenance.vehicle, maintenance)
    db.commit()
    db.refresh(maintenance)
    return maintenance


@router.get("/{vehicle_id}", response_model=VehicleRead)
async def get_vehicle(vehicle_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_scoped_record(db, Vehicle, vehicle_id, current_user, "Vehicle not found")


@router.put("/{vehicle_id}", response_model=VehicleRead)
async def update_vehicle(
    vehicle_id: int,
    vehicle_in: VehicleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    vehicle = get_scoped_record(db, Vehicle, vehicle_id, current_user, "Vehicle not found")
    update_data = vehicle_in.model_dump(exclude_unset=True)
    if update_data.get("license_plate"):
        update_data["license_plate"] = update_data["license_plate"].strip().upper()
        _ensure_plate_free(db, update_data["license_plate"], vehicle.id)
    for field, value in update_data.items():
        if value is not None:
            setattr(vehicle, field, value)
    db.commit()
    db.refresh(vehicle)
    return vehicle


@router.get("/{vehicle_id}/maintenance", response_model=list[MaintenanceRead])
async def list_vehicle_maintenance(vehicle_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    vehicle = get_scoped_record(db, Vehicle, vehicle_id, current_user, "Vehicle not found")
    return (
        db.query(Maintenance)
        .filter(Maintenance.vehicle_id == vehicle.id)
        .order_by(Maintenance.maintenance_date.desc(), Maintenance.id.desc())
        .all()
    )


@router.post("/{vehicle_id}/maintenance", response_model=MaintenanceRead, status_code=status.HTTP_201_CREATED)
async def add_maintenance(
    vehicle_id: int,
    maintenance_in: MaintenanceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    vehicle = get_scoped_record(db, Vehicle, vehicle_id, current_user, "Vehicle not found")
    maintenance = Maintenance(vehicle_id=vehicle.id, **maintenance_in.model_dump())
    db.add(maintenance)
    db.flush()
    sync_vehicle_status(db, vehicle, maintenance)
    db.commit()
    db.refresh(maintenance)
    return maintenance


@router.get("/{vehicle_id}/inspections", response_model=list[InspectionRead])
async def list_inspections(vehicle_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    vehicle = get_scoped_record(db, Vehicle, vehicle_id, current_user, "Vehicle not found")
    return (
        db.query(Inspection)
        .filter(Inspection.vehicle_id == vehicle.id)
        .order_by(Inspection.inspection_date.desc(), Inspection.id.desc())
        .all()
    )


@router.post("/{vehicle_id}/inspections", response_model=InspectionRead, status_code=status.HTTP_201_CREATED)
async def add_inspection(
    vehicle_id: int,
    inspection_in: InspectionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    vehicle = get_scoped_record(db, Vehicle, vehicle_id, current_user, "Vehicle not found")
    if vehicle.vehicle_type != "car":
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inspections are only recorded for cars")
    inspection = Inspection(vehicle_id=vehicle.id, **inspection_in.model_dump())
    db.add(inspection)
    db.commit()
    db.refresh(inspection)
    return inspection
