"""
Pydantic schemas for expense entries.

The Python attribute for the expense day is spent_on; on the
wire it is "date".
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from pydantic import Field, field_validator

from expense_tracker.schemas.common import ApiModel

CENT = Decimal("0.01")
# Numeric(12, 2) holds up to ten integer digits
MAX_AMOUNT = Decimal("10000000000")


# --- Request Schemas ---

class ExpenseCreate(ApiModel):
    """Payload for creating an expense, and for replacing one on update."""
    spent_on: date = Field(alias="date")
    amount: Decimal = Field(gt=0, lt=MAX_AMOUNT)
    responsible_party: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=255)
    description: str | None = ""
    location: str = Field(min_length=1, max_length=255)

    @field_validator("amount")
    @classmethod
    def amount_in_cents(cls, v: Decimal) -> Decimal:
        # Stored with two decimals; what survives rounding must stay positive
        v = v.quantize(CENT, rounding=ROUND_HALF_UP)
        if v <= 0:
            raise ValueError("amount must be at least 0.01")
        return v

    @field_validator("description")
    @classmethod
    def empty_description(cls, v: str | None) -> str:
        return (v or "").strip()


ExpenseUpdate = ExpenseCreate


# --- Response Schemas ---

class ExpenseResponse(ApiModel):
    id: int
    spent_on: date = Field(alias="date")
    amount: float
    responsible_party: str
    category: str
    description: str
    location: str


class ExpenseListResponse(ApiModel):
    expenses: list[ExpenseResponse]
