"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from expense_tracker.models.base import Base, Database
from expense_tracker.models.enums import Role, LookupKind
from expense_tracker.models.account import Account
from expense_tracker.models.expense import Expense
from expense_tracker.models.lookup import (
    ResponsibleParty,
    Category,
    Location,
    LOOKUP_MODELS,
)

__all__ = [
    "Base",
    "Database",
    "Role",
    "LookupKind",
    "Account",
    "Expense",
    "ResponsibleParty",
    "Category",
    "Location",
    "LOOKUP_MODELS",
]
