"""Notification panel endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, resolve_office_scope
from drivedesk.app.models.notification import Notification
from drivedesk.app.models.user import User
from drivedesk.app.schemas.notification import NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _scoped_notifications(db: Session, current_user: User, office_id: int | None = None):
    query = db.query(Notification)
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(Notification.office_id == scope)
    return query


@router.get("/", response_model=list[NotificationRead])
async def list_notifications(
    office_id: int | None = None,
    unread_only: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = _scoped_notifications(db, current_user, office_id)
    if unread_only:
        query = query.filter(Notification.read.is_(False))
    return query.order_by(Notification.created_at.desc(), Notification.id.desc()).all()


@router.post("/read-all")
async def mark_all_notifications_read(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    notifications = _scoped_notifications(db, current_user).filter(Notification.read.is_(False)).all()
    for notification in notifications:
        notification.read = True
    db.commit()
    return {"success": True, "updated": len(notifications)}


@router.post("/{notification_id}/read", response_model=NotificationRead)
async def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    notification = _scoped_notifications(db, current_user).filter(Notification.id == notification_id).first()
    if not notification:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    notification.read = True
    db.commit()
    db.refresh(notification)
    return notification
