"""
Pydantic schemas for login and session lookups.
"""

from pydantic import Field, field_validator

from expense_tracker.models.enums import Role
from expense_tracker.schemas.common import ApiModel


class LoginRequest(ApiModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class AccountProfile(ApiModel):
    """The public view of an account."""
    id: int
    email: str
    name: str
    role: Role


class LoginResponse(ApiModel):
    token: str
    account: AccountProfile


class MeResponse(ApiModel):
    account: AccountProfile
