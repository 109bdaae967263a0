"""
Shared request dependencies.

get_current_account resolves the bearer token to a live account
row; every owned-resource endpoint takes its account id from
here and never from the request body. require_role builds the
single role gate used by the admin endpoints.
"""

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from expense_tracker.config import Settings
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.models.account import Account
from expense_tracker.models.base import get_db
from expense_tracker.models.enums import Role
from expense_tracker.services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """The Settings the running app was created with."""
    return request.app.state.settings


def to_http_error(error: ExpenseTrackerError) -> HTTPException:
    headers = None
    if error.status_code == 401:
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(
        status_code=error.status_code, detail=str(error), headers=headers
    )


def get_current_account(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> Account:
    token = credentials.credentials if credentials else None
    try:
        return AuthService(db, settings).resolve_session(token)
    except ExpenseTrackerError as e:
        raise to_http_error(e)


def require_role(role: Role):
    """Build a dependency that only lets accounts with `role` through."""

    def checker(account: Account = Depends(get_current_account)) -> Account:
        try:
            return AuthService.require_role(account, role)
        except ExpenseTrackerError as e:
            raise to_http_error(e)

    return checker


require_admin = require_role(Role.ADMIN)
