"""Login endpoint for DriveDesk staff."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.security import create_access_token, verify_password
from drivedesk.app.core.time import utc_now
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user
from drivedesk.app.models.user import User
from drivedesk.app.schemas.login import LoginRequest, TokenResponse
from drivedesk.app.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])
logger = get_logger(__name__)


@router.post("/login", response_model=TokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == credentials.email).first()
    if not user or not user.hashed_password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User is inactive")
    if not verify_password(credentials.password, user.hashed_password):
        logger.warning("login_failed", user_id=user.id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

    user.last_login = utc_now()
    db.commit()
    token = create_access_token(user_id=user.id, role=user.role, office_id=user.office_id)
    return TokenResponse(access_token=token)


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
