from datetime import date
from decimal import Decimal
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ChargeCategory = Literal[
    "office_rent",
    "electricity",
    "water",
    "phone",
    "internet",
    "software",
    "salary",
    "mechanic",
    "purchase",
    "other",
]


class ChargeCreate(BaseModel):
    category: ChargeCategory
    amount: Decimal = Field(gt=0, decimal_places=2)
    beneficiary: str = Field(min_length=1)
    charge_date: Optional[date] = None
    invoice_url: Optional[str] = None
    office_id: Optional[int] = None


class ChargeRead(BaseModel):
    id: int
    office_id: int
    category: ChargeCategory
    amount: Decimal
    beneficiary: str
    charge_date: date
    invoice_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ChargeSummary(BaseModel):
    total: Decimal
    by_category: Dict[str, Decimal]
