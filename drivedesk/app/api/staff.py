"""Office staff endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.time import default_date
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, get_scoped_record, require_office, resolve_office_scope
from drivedesk.app.models.staff_member import StaffMember
from drivedesk.app.models.user import User
from drivedesk.app.schemas.staff import StaffCreate, StaffRead, StaffUpdate
from drivedesk.app.services.listing import apply_sorting

router = APIRouter(prefix="/staff", tags=["staff"])
logger = get_logger(__name__)


@router.post("/", response_model=StaffRead, status_code=status.HTTP_201_CREATED)
async def create_staff_member(staff_in: StaffCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    office_id = require_office(db, current_user, staff_in.office_id)
    data = staff_in.model_dump(exclude={"office_id", "hire_date"})
    member = StaffMember(office_id=office_id, hire_date=default_date(staff_in.hire_date), status="present", **data)
    db.add(member)
    db.commit()
    db.refresh(member)
    logger.info("staff_member_created", staff_id=member.id, office_id=office_id)
    return member


@router.get("/", response_model=list[StaffRead])
async def list_staff(
    office_id: int | None = None,
    presence: str | None = None,
    sort_by: str = "name",
    sort_order: str = "asc",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(StaffMember)
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(StaffMember.office_id == scope)
    if presence:
        query = query.filter(StaffMember.status == presence)

    supported_sort_fields = {
        "name": StaffMember.name,
        "hire_date": StaffMember.hire_date,
        "id": StaffMember.id,
    }
    return apply_sorting(query, supported_sort_fields, sort_by, sort_order).all()


@router.get("/{staff_id}", response_model=StaffRead)
async def get_staff_member(staff_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_scoped_record(db, StaffMember, staff_id, current_user, "Staff member not found")


@router.put("/{staff_id}", response_model=StaffRead)
async def update_staff_member(
    staff_id: int,
    staff_in: StaffUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    member = get_scoped_record(db, StaffMember, staff_id, current_user, "Staff member not found")
    for field, value in staff_in.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(member, field, value)
    db.commit()
    db.refresh(member)
    return member
