"""
Login and session endpoints.

Logging out is the client discarding its token; there is no
server-side session to end.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from expense_tracker.api.deps import (
    get_app_settings,
    get_current_account,
    to_http_error,
)
from expense_tracker.config import Settings
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.models.account import Account
from expense_tracker.models.base import get_db
from expense_tracker.schemas.auth import (
    AccountProfile,
    LoginRequest,
    LoginResponse,
    MeResponse,
)
from expense_tracker.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Exchange email and password for a bearer token."""
    service = AuthService(db, settings)
    try:
        token, account = service.authenticate(request.email, request.password)
    except ExpenseTrackerError as e:
        raise to_http_error(e)

    return LoginResponse(
        token=token, account=AccountProfile.model_validate(account)
    )


@router.get("/me", response_model=MeResponse)
def me(account: Account = Depends(get_current_account)):
    """Return the profile of the account behind the token."""
    return MeResponse(account=AccountProfile.model_validate(account))
