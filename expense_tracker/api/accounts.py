"""
Account administration endpoints. Admin only.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from expense_tracker.api.deps import require_admin, to_http_error
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.models.account import Account
from expense_tracker.models.base import get_db
from expense_tracker.schemas.account import (
    AccountCreate,
    AccountListResponse,
    AccountResponse,
    AccountUpdate,
)
from expense_tracker.schemas.common import OkResponse
from expense_tracker.services.account_service import AccountService

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.get("", response_model=AccountListResponse)
def list_accounts(
    admin: Account = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """List every account, newest first."""
    service = AccountService(db)
    accounts = service.list_accounts()
    return AccountListResponse(
        accounts=[AccountResponse.model_validate(a) for a in accounts]
    )


@router.post("", response_model=OkResponse)
def create_account(
    request: AccountCreate,
    admin: Account = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Provision a new account."""
    service = AccountService(db)
    try:
        account = service.create_account(admin, request)
        db.commit()
        return OkResponse(id=account.id)
    except ExpenseTrackerError as e:
        db.rollback()
        raise to_http_error(e)


@router.put("/{account_id}", response_model=OkResponse)
def update_account(
    account_id: int,
    request: AccountUpdate,
    admin: Account = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Edit an account's name, role or password."""
    service = AccountService(db)
    try:
        service.update_account(admin, account_id, request)
        db.commit()
        return OkResponse()
    except ExpenseTrackerError as e:
        db.rollback()
        raise to_http_error(e)


@router.delete("/{account_id}", response_model=OkResponse)
def delete_account(
    account_id: int,
    admin: Account = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """
    Delete an account together with all of its data.

    An admin cannot delete their own account.
    """
    service = AccountService(db)
    try:
        service.delete_account(admin, account_id)
        db.commit()
        return OkResponse()
    except ExpenseTrackerError as e:
        db.rollback()
        raise to_http_error(e)
