"""License category price table endpoints."""

from decimal import Decimal
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from drivedesk.app.crud.crud_license_price import license_price_crud
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_admin, get_current_user
from drivedesk.app.models.license_price import LicensePrice
from drivedesk.app.models.user import User
from drivedesk.app.schemas.license_price import LicensePriceCreate, LicensePriceUpdate, normalize_category

router = APIRouter(prefix="/license-prices", tags=["license-prices"])


def _get_price_or_404(db: Session, category: str) -> LicensePrice:
    entry = license_price_crud.get(db, category=normalize_category(category))
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category does not exist.")
    return entry


@router.get("/", response_model=Dict[str, Decimal])
async def get_license_prices(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return license_price_crud.as_table(db)


@router.post("/", response_model=Dict[str, Decimal], status_code=status.HTTP_201_CREATED)
async def add_license_price(
    price_in: LicensePriceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    category = price_in.category
    if license_price_crud.get(db, category=category) is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Category '{category}' already exists.")
    license_price_crud.create(db, obj_in=price_in)
    return license_price_crud.as_table(db)


@router.put("/{category}", response_model=Dict[str, Decimal])
async def update_license_price(
    category: str,
    price_in: LicensePriceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    entry = _get_price_or_404(db, category)
    license_price_crud.update(db, db_obj=entry, obj_in=price_in)
    return license_price_crud.as_table(db)


@router.delete("/{category}", response_model=Dict[str, Decimal])
async def delete_license_price(
    category: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    entry = _get_price_or_404(db, category)
    license_price_crud.delete(db, db_obj=entry)
    return license_price_crud.as_table(db)
