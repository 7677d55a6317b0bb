"""Dashboard endpoints for office staff and the super admin."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_superadmin, get_current_user, resolve_office_scope
from drivedesk.app.models.user import User
from drivedesk.app.schemas.dashboard import DashboardStats, SuperAdminStats
from drivedesk.app.services.dashboard import get_dashboard_stats, get_superadmin_stats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(
    office_id: int | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return get_dashboard_stats(db, office_id=resolve_office_scope(current_user, office_id))


@router.get("/superadmin", response_model=SuperAdminStats)
async def superadmin_stats(db: Session = Depends(get_db), current_user: User = Depends(get_current_superadmin)):
    return get_superadmin_stats(db)
