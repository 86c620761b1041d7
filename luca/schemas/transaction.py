"""
Transaction schemas.
"""

from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import date
from decimal import Decimal

from luca.schemas.category import Category, Source


class Transaction(BaseModel):
    """One bank ledger line. Amount is negative for money out."""
    id: str
    date: date
    concept: str
    amount: Decimal
    balance: Decimal = Decimal("0")
    category: Category
    source: Source
    original_row: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def amount_not_zero(cls, v: Decimal) -> Decimal:
        if v == 0:
            raise ValueError("amount must be non-zero")
        return v

    class Config:
        frozen = True
        from_attributes = True


class CategorizeRequest(BaseModel):
    description: str
    amount: Decimal


class CategorizeResponse(BaseModel):
    category: Category
