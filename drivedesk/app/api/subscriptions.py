"""Subscription plan catalogue offered to offices."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_superadmin, get_current_user
from drivedesk.app.models.subscription_plan import SubscriptionPlan
from drivedesk.app.models.user import User
from drivedesk.app.schemas.subscription_plan import SubscriptionPlanRead, SubscriptionPlanUpdate

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])
logger = get_logger(__name__)


@router.get("/", response_model=list[SubscriptionPlanRead])
async def list_subscription_plans(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return db.query(SubscriptionPlan).order_by(SubscriptionPlan.price.asc(), SubscriptionPlan.id.asc()).all()


@router.put("/{plan_id}", response_model=SubscriptionPlanRead)
async def update_subscription_plan(
    plan_id: int,
    plan_in: SubscriptionPlanUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_superadmin),
):
    plan = db.query(SubscriptionPlan).filter(SubscriptionPlan.id == plan_id).first()
    if not plan:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subscription not found")
    for field, value in plan_in.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(plan, field, value)
    db.commit()
    db.refresh(plan)
    logger.info("subscription_plan_updated", plan_id=plan.id, code=plan.code)
    return plan
