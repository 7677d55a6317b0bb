"""Vehicle availability driven by maintenance records.

A scheduled maintenance takes the vehicle off the road. Completing one puts it
back to ``available`` unless another scheduled maintenance is still open.
"""

from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.models.maintenance import Maintenance
from drivedesk.app.models.vehicle import Vehicle

logger = get_logger(__name__)


def vehicle_status_after_maintenance(current_status: str, maintenance_status: str, has_open_maintenance: bool) -> str:
    if maintenance_status == "scheduled":
        return "maintenance"
    if maintenance_status == "completed" and not has_open_maintenance:
        return "available"
    return current_status


def has_open_maintenance(db: Session, vehicle_id: int, exclude_id: int | None = None) -> bool:
    query = db.query(Maintenance).filter(Maintenance.vehicle_id == vehicle_id, Maintenance.status == "scheduled")
    if exclude_id is not None:
        query = query.filter(Maintenance.id != exclude_id)
    return db.query(query.exists()).scalar()


def sync_vehicle_status(db: Session, vehicle: Vehicle, maintenance: Maintenance) -> Vehicle:
    """Apply a new or updated maintenance record to its vehicle's status. Caller commits."""
    previous = vehicle.status
    vehicle.status = vehicle_status_after_maintenance(
        vehicle.status,
        maintenance.status,
        has_open_maintenance(db, vehicle.id, exclude_id=maintenance.id),
    )
    if vehicle.status != previous:
        logger.info("vehicle_status_changed", vehicle_id=vehicle.id, previous=previous, status=vehicle.status)
    return vehicle
