"""School profile shown on an office's settings page."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, require_office
from drivedesk.app.models.office import Office
from drivedesk.app.models.office_profile import OfficeProfile
from drivedesk.app.models.user import User
from drivedesk.app.schemas.office_profile import OfficeProfileRead, OfficeProfileUpdate

router = APIRouter(prefix="/school-profile", tags=["school-profile"])


def _get_or_build_profile(db: Session, office_id: int) -> OfficeProfile:
    profile = db.query(OfficeProfile).filter(OfficeProfile.office_id == office_id).first()
    if profile is None:
        office = db.query(Office).filter(Office.id == office_id).first()
        profile = OfficeProfile(office_id=office_id, name=office.name, address=office.address, phone=office.phone)
    return profile


@router.get("/", response_model=OfficeProfileRead)
async def get_school_profile(
    office_id: int | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return _get_or_build_profile(db, require_office(db, current_user, office_id))


@router.put("/", response_model=OfficeProfileRead)
async def update_school_profile(
    profile_in: OfficeProfileUpdate,
    office_id: int | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    profile = _get_or_build_profile(db, require_office(db, current_user, office_id))
    for field, value in profile_in.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(profile, field, value)
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile
