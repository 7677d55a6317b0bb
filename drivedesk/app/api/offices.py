"""Office (tenant) and secretary account management."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.security import get_password_hash
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_superadmin, get_current_user
from drivedesk.app.models.office import Office
from drivedesk.app.models.user import User
from drivedesk.app.schemas.office import OfficeCreate, OfficeRead
from drivedesk.app.schemas.user import AdminCreate, SecretaryCreate, UserRead

router = APIRouter(prefix="/offices", tags=["offices"])
logger = get_logger(__name__)


@router.get("/", response_model=list[OfficeRead])
async def list_offices(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    query = db.query(Office)
    if current_user.role == "secretary":
        query = query.filter(Office.id == current_user.office_id)
    return query.order_by(Office.id.asc()).all()


@router.post("/", response_model=OfficeRead, status_code=status.HTTP_201_CREATED)
async def create_office(
    office_in: OfficeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_superadmin),
):
    office = Office(**office_in.model_dump())
    db.add(office)
    db.commit()
    db.refresh(office)
    logger.info("office_created", office_id=office.id, plan=office.subscription_plan)
    return office


@router.get("/secretaries", response_model=list[UserRead])
async def list_secretaries(db: Session = Depends(get_db), current_user: User = Depends(get_current_superadmin)):
    return db.query(User).filter(User.role == "secretary").order_by(User.id.asc()).all()


@router.post("/secretaries", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_secretary(
    secretary_in: SecretaryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_superadmin),
):
    if not db.query(Office).filter(Office.id == secretary_in.office_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Office not found")
    if db.query(User).filter(User.email == secretary_in.email).first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    secretary = User(
        email=secretary_in.email,
        full_name=secretary_in.full_name,
        hashed_password=get_password_hash(secretary_in.password),
        role="secretary",
        office_id=secretary_in.office_id,
    )
    db.add(secretary)
    db.commit()
    db.refresh(secretary)
    return secretary


@router.delete("/secretaries/{secretary_id}")
async def delete_secretary(
    secretary_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_superadmin),
):
    secretary = db.query(User).filter(User.id == secretary_id, User.role == "secretary").first()
    if not secretary:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Secretary not found")
    db.delete(secretary)
    db.commit()
    return {"status": "deleted", "id": secretary_id}


@router.get("/admins", response_model=list[UserRead])
async def list_admins(db: Session = Depends(get_db), current_user: User = Depends(get_current_superadmin)):
    return db.query(User).filter(User.role == "admin").order_by(User.id.asc()).all()


@router.post("/admins", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_admin(
    admin_in: AdminCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_superadmin),
):
    if admin_in.office_id is not None and not db.query(Office).filter(Office.id == admin_in.office_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Office not found")
    if db.query(User).filter(User.email == admin_in.email).first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    admin = User(
        email=admin_in.email,
        full_name=admin_in.full_name,
        hashed_password=get_password_hash(admin_in.password),
        role="admin",
        office_id=admin_in.office_id,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("admin_created", user_id=admin.id, office_id=admin.office_id)
    return admin
