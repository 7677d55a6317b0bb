"""Office charges (expenses) endpoints."""

from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from drivedesk.app.core.logging import get_logger
from drivedesk.app.core.time import default_date
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_user, require_office, resolve_office_scope
from drivedesk.app.models.charge import Charge
from drivedesk.app.models.user import User
from drivedesk.app.schemas.charge import ChargeCreate, ChargeRead, ChargeSummary
from drivedesk.app.services.listing import apply_sorting

router = APIRouter(prefix="/charges", tags=["charges"])
logger = get_logger(__name__)


@router.post("/", response_model=ChargeRead, status_code=status.HTTP_201_CREATED)
async def create_charge(charge_in: ChargeCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    office_id = require_office(db, current_user, charge_in.office_id)
    charge = Charge(
        office_id=office_id,
        category=charge_in.category,
        amount=charge_in.amount,
        beneficiary=charge_in.beneficiary,
        charge_date=default_date(charge_in.charge_date),
        invoice_url=charge_in.invoice_url,
    )
    db.add(charge)
    db.commit()
    db.refresh(charge)
    logger.info("charge_recorded", charge_id=charge.id, office_id=office_id, category=charge.category)
    return charge


def _scoped_charges(db: Session, current_user: User, office_id: int | None, category: str | None, from_date, to_date):
    query = db.query(Charge)
    scope = resolve_office_scope(current_user, office_id)
    if scope is not None:
        query = query.filter(Charge.office_id == scope)
    if category:
        query = query.filter(Charge.category == category)
    if from_date is not None:
        query = query.filter(Charge.charge_date >= from_date)
    if to_date is not None:
        query = query.filter(Charge.charge_date <= to_date)
    return query


@router.get("/", response_model=list[ChargeRead])
async def list_charges(
    office_id: int | None = None,
    category: str | None = None,
    from_date: date | None = None,
    to_date: date | None = None,
    sort_by: str = "charge_date",
    sort_order: str = "desc",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = _scoped_charges(db, current_user, office_id, category, from_date, to_date)
    supported_sort_fields = {
        "charge_date": Charge.charge_date,
        "amount": Charge.amount,
        "id": Charge.id,
    }
    return apply_sorting(query, supported_sort_fields, sort_by, sort_order).all()


@router.get("/summary", response_model=ChargeSummary)
async def summarize_charges(
    office_id: int | None = None,
    from_date: date | None = None,
    to_date: date | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = _scoped_charges(db, current_user, office_id, None, from_date, to_date)
    rows = query.with_entities(Charge.category, func.sum(Charge.amount)).group_by(Charge.category).all()
    by_category = {category: Decimal(str(total)).quantize(Decimal("0.01")) for category, total in rows}
    return ChargeSummary(total=sum(by_category.values(), Decimal("0.00")), by_category=by_category)
