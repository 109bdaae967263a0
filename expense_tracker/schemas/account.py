"""
Pydantic schemas for account administration.
"""

from datetime import datetime

from pydantic import Field, field_validator

from expense_tracker.models.enums import Role
from expense_tracker.schemas.common import ApiModel

MIN_PASSWORD_LENGTH = 4


# --- Request Schemas ---

class AccountCreate(ApiModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    role: Role = Role.USER

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class AccountUpdate(ApiModel):
    """Admin profile edit. Only the supplied fields change."""
    name: str | None = Field(default=None, min_length=1, max_length=100)
    role: Role | None = None
    password: str | None = Field(default=None, min_length=MIN_PASSWORD_LENGTH)


# --- Response Schemas ---

class AccountResponse(ApiModel):
    id: int
    name: str
    email: str
    role: Role
    created_at: datetime


class AccountListResponse(ApiModel):
    accounts: list[AccountResponse]
