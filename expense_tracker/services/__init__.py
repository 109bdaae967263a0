"""Business logic services."""

from expense_tracker.services.auth_service import AuthService
from expense_tracker.services.account_service import AccountService
from expense_tracker.services.expense_service import ExpenseService
from expense_tracker.services.lookup_service import LookupService

__all__ = ["AuthService", "AccountService", "ExpenseService", "LookupService"]
