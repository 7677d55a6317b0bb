from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


def normalize_category(value: str) -> str:
    return value.strip().upper()


class LicensePriceCreate(BaseModel):
    category: str = Field(min_length=1, max_length=10)
    price: Decimal = Field(ge=0, decimal_places=2)

    @field_validator("category")
    @classmethod
    def clean_category(cls, value: str) -> str:
        value = normalize_category(value)
        if not value:
            raise ValueError("category must not be blank")
        return value


class LicensePriceUpdate(BaseModel):
    price: Decimal = Field(ge=0, decimal_places=2)
