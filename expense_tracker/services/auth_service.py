"""
Auth service: credentials, sessions, roles, and the bootstrap admin.

A session token only proves who the caller is. What the caller
may do is always read from the current account row, so a role
change or a deletion takes effect on the very next request.
"""

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session

from expense_tracker.config import Settings
from expense_tracker.errors import Forbidden, InvalidCredentials, Unauthorized
from expense_tracker.models.account import Account
from expense_tracker.models.enums import Role
from expense_tracker.security import (
    InvalidToken,
    create_session_token,
    hash_password,
    read_session_token,
    verify_password,
)

logger = structlog.get_logger(__name__)


class AuthService:

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def _find_by_email(self, email: str) -> Account | None:
        return self.db.execute(
            select(Account).where(Account.email == email)
        ).scalar_one_or_none()

    def authenticate(self, email: str, password: str) -> tuple[str, Account]:
        """
        Verify credentials and issue a session token.

        An unknown email and a wrong password both raise
        InvalidCredentials, and both pay for a hash verification.
        """
        email = email.strip().lower()
        account = self._find_by_email(email)
        stored_hash = account.password_hash if account else None

        if not verify_password(password, stored_hash):
            logger.info("login_failed", email=email)
            raise InvalidCredentials()

        token = create_session_token(
            self.settings.SECRET_KEY, account.id, account.email
        )
        logger.info("login_succeeded", account_id=account.id)
        return token, account

    def resolve_session(self, token: str | None) -> Account:
        """Return the live account behind a bearer token."""
        if not token:
            raise Unauthorized("Not authenticated")

        try:
            claims = read_session_token(
                self.settings.SECRET_KEY,
                token,
                max_age=self.settings.session_ttl_seconds,
            )
        except InvalidToken as e:
            logger.info("session_rejected", reason=e.reason)
            raise Unauthorized("Invalid or expired session")

        account = self.db.get(Account, claims["id"])
        if account is None:
            logger.info(
                "session_rejected", reason="unknown_account", account_id=claims["id"]
            )
            raise Unauthorized("Account no longer exists")
        return account

    @staticmethod
    def require_role(account: Account, role: Role) -> Account:
        if account.role != role:
            raise Forbidden(f"Requires the {role.value} role")
        return account

    def bootstrap_admin(
        self, email: str, password: str, name: str = "Administrator"
    ) -> Account | None:
        """
        Make sure the configured admin account exists and is an admin.

        Safe to run on every startup. An existing account is
        promoted back to admin and gets a display name if it has
        none; its password is left alone.
        """
        email = (email or "").strip().lower()
        password = (password or "").strip()
        if not email or not password:
            logger.warning("bootstrap_skipped", reason="admin credentials not set")
            return None

        account = self._find_by_email(email)
        if account is None:
            account = Account(
                email=email,
                password_hash=hash_password(password),
                name=name,
                role=Role.ADMIN,
            )
            self.db.add(account)
            self.db.flush()
            logger.info("bootstrap_admin_created", account_id=account.id, email=email)
            return account

        account.role = Role.ADMIN
        if not account.name:
            account.name = name
        self.db.flush()
        logger.info("bootstrap_admin_ensured", account_id=account.id, email=email)
        return account
