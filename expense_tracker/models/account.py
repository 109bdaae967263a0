"""
Account model.

An account is a tenant: it owns every expense and lookup entry
recorded under it. The role decides whether it can manage other
accounts.
"""

from datetime import datetime

from sqlalchemy import String, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from expense_tracker.models.base import Base
from expense_tracker.models.enums import Role


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    # Always stored trimmed and lower-cased
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    role: Mapped[Role] = mapped_column(
        SAEnum(
            Role,
            name="role_enum",
            values_callable=lambda roles: [r.value for r in roles],
            create_constraint=True,
        ),
        nullable=False,
        default=Role.USER,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __repr__(self) -> str:
        return f"<Account {self.email} ({self.role.value})>"
