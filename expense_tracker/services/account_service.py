"""
Account service: admin-side management of tenant accounts.

Callers must already have checked that the actor is an admin.
Deleting an account removes everything it owns in the same
transaction; the caller commits once at the end.
"""

import structlog
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expense_tracker.errors import Conflict, ValidationError
from expense_tracker.models.account import Account
from expense_tracker.models.enums import Role
from expense_tracker.models.expense import Expense
from expense_tracker.models.lookup import LOOKUP_MODELS
from expense_tracker.schemas.account import AccountCreate, AccountUpdate
from expense_tracker.security import hash_password

logger = structlog.get_logger(__name__)

# Everything an account owns, children before the account row
OWNED_MODELS = (Expense, *LOOKUP_MODELS.values())


class AccountService:

    def __init__(self, db: Session):
        self.db = db

    def list_accounts(self) -> list[Account]:
        """All accounts, newest first."""
        accounts = self.db.execute(
            select(Account).order_by(Account.id.desc())
        ).scalars().all()
        return list(accounts)

    def create_account(self, actor: Account, request: AccountCreate) -> Account:
        """
        Create an account with a hashed password.

        Raises Conflict if the email is already registered.
        Emails are compared after trimming and lower-casing.
        """
        email = request.email.strip().lower()
        existing = self.db.execute(
            select(Account).where(Account.email == email)
        ).scalar_one_or_none()

        if existing:
            raise Conflict(f"Email '{email}' is already registered")

        account = Account(
            name=request.name,
            email=email,
            password_hash=hash_password(request.password),
            role=request.role,
        )
        self.db.add(account)
        try:
            self.db.flush()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            raise Conflict(f"Email '{email}' is already registered")

        logger.info(
            "account_created",
            actor_id=actor.id,
            account_id=account.id,
            role=account.role.value,
        )
        return account

    def update_account(
        self, actor: Account, account_id: int, request: AccountUpdate
    ) -> Account | None:
        """
        Apply an admin profile edit.

        Returns None when no such account exists. An admin may not
        drop their own admin role.
        """
        if (
            account_id == actor.id
            and request.role is not None
            and request.role != Role.ADMIN
        ):
            raise ValidationError("You cannot remove your own admin role")

        account = self.db.get(Account, account_id)
        if account is None:
            return None

        if request.name is not None:
            account.name = request.name
        if request.role is not None:
            account.role = request.role
        if request.password is not None:
            account.password_hash = hash_password(request.password)

        self.db.flush()
        logger.info("account_updated", actor_id=actor.id, account_id=account.id)
        return account

    def delete_account(self, actor: Account, account_id: int) -> bool:
        """
        Delete an account and every expense and lookup entry it owns.

        Returns False when there was no such account. The whole
        cascade runs in the caller's transaction, so it is either
        committed together or rolled back together.
        """
        if account_id == actor.id:
            raise ValidationError("You cannot delete your own account")

        for model in OWNED_MODELS:
            self.db.execute(delete(model).where(model.account_id == account_id))

        result = self.db.execute(delete(Account).where(Account.id == account_id))
        self.db.flush()

        deleted = result.rowcount > 0
        if deleted:
            logger.info("account_deleted", actor_id=actor.id, account_id=account_id)
        return deleted
