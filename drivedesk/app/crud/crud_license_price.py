"""CRUD operations for the license category price table."""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from drivedesk.app.models.license_price import LicensePrice
from drivedesk.app.schemas.license_price import LicensePriceCreate, LicensePriceUpdate, normalize_category


class CRUDLicensePrice:
    def create(self, db: Session, *, obj_in: LicensePriceCreate) -> LicensePrice:
        obj = LicensePrice(category=obj_in.category, price=obj_in.price)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, category: str) -> Optional[LicensePrice]:
        return db.query(LicensePrice).filter(LicensePrice.category == normalize_category(category)).first()

    def get_multi(self, db: Session) -> List[LicensePrice]:
        return db.query(LicensePrice).order_by(LicensePrice.category.asc()).all()

    def as_table(self, db: Session) -> Dict[str, object]:
        return {entry.category: entry.price for entry in self.get_multi(db)}

    def update(self, db: Session, *, db_obj: LicensePrice, obj_in: LicensePriceUpdate) -> LicensePrice:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: LicensePrice) -> LicensePrice:
        db.delete(db_obj)
        db.commit()
        return db_obj


license_price_crud = CRUDLicensePrice()
