"""
Expense endpoints.

Everything is scoped to the calling account. Updating or
deleting an id the caller does not own answers 200 and changes
nothing.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from expense_tracker.api.deps import get_current_account, to_http_error
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.models.account import Account
from expense_tracker.models.base import get_db
from expense_tracker.schemas.common import OkResponse
from expense_tracker.schemas.expense import (
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseResponse,
    ExpenseUpdate,
)
from expense_tracker.services.expense_service import ExpenseService

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.post("", response_model=OkResponse)
def create_expense(
    request: ExpenseCreate,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    service = ExpenseService(db)
    expense = service.create_expense(account.id, request)
    db.commit()
    return OkResponse(id=expense.id)


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    year: int | None = Query(default=None, ge=1000, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    """
    List the caller's expenses, newest first.

    Optional year (e.g. 2024) and month (1-12, "03" is accepted)
    filters can be combined.
    """
    service = ExpenseService(db)
    try:
        expenses = service.list_expenses(account.id, year=year, month=month)
    except ExpenseTrackerError as e:
        raise to_http_error(e)
    return ExpenseListResponse(
        expenses=[ExpenseResponse.model_validate(e) for e in expenses]
    )


@router.put("/{expense_id}", response_model=OkResponse)
def update_expense(
    expense_id: int,
    request: ExpenseUpdate,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    service = ExpenseService(db)
    service.update_expense(account.id, expense_id, request)
    db.commit()
    return OkResponse()


@router.delete("/{expense_id}", response_model=OkResponse)
def delete_expense(
    expense_id: int,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    service = ExpenseService(db)
    service.delete_expense(account.id, expense_id)
    db.commit()
    return OkResponse()
