"""
Lookup entry models.

Each account keeps three reusable label lists that are offered
when recording an expense. The lists share one shape; each kind
lives in its own table, unique per (account, name).
"""

from sqlalchemy import String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, declared_attr

from expense_tracker.models.base import Base
from expense_tracker.models.enums import LookupKind


class LookupEntryMixin:
    id: Mapped[int] = mapped_column(primary_key=True)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    @declared_attr.directive
    def __table_args__(cls):
        return (
            UniqueConstraint(
                "account_id", "name", name=f"uq_{cls.__tablename__}_account_name"
            ),
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class ResponsibleParty(LookupEntryMixin, Base):
    __tablename__ = "responsible_parties"


class Category(LookupEntryMixin, Base):
    __tablename__ = "categories"


class Location(LookupEntryMixin, Base):
    __tablename__ = "locations"


LOOKUP_MODELS: dict[LookupKind, type[LookupEntryMixin]] = {
    LookupKind.RESPONSIBLE_PARTY: ResponsibleParty,
    LookupKind.CATEGORY: Category,
    LookupKind.LOCATION: Location,
}
