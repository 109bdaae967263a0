"""
Lookup service: the per-account responsible party, category
and location lists.

Adding a name the account already has is a no-op that returns
the existing entry. Renames and deletions are scoped by owner
and silently match nothing for ids the owner does not have.
Expenses store lookup values by name, so neither operation
touches recorded expenses.
"""

from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expense_tracker.errors import Conflict
from expense_tracker.models.enums import LookupKind
from expense_tracker.models.lookup import LOOKUP_MODELS, LookupEntryMixin


class LookupService:

    def __init__(self, db: Session):
        self.db = db

    def _find_by_name(
        self, owner_id: int, kind: LookupKind, name: str
    ) -> LookupEntryMixin | None:
        model = LOOKUP_MODELS[kind]
        return self.db.execute(
            select(model).where(model.account_id == owner_id, model.name == name)
        ).scalar_one_or_none()

    def list_entries(self, owner_id: int, kind: LookupKind) -> list[LookupEntryMixin]:
        """The owner's entries of one kind, alphabetical."""
        model = LOOKUP_MODELS[kind]
        entries = self.db.execute(
            select(model)
            .where(model.account_id == owner_id)
            .order_by(model.name.asc())
        ).scalars().all()
        return list(entries)

    def list_all(self, owner_id: int) -> dict[LookupKind, list[LookupEntryMixin]]:
        return {kind: self.list_entries(owner_id, kind) for kind in LookupKind}

    def add_entry(
        self, owner_id: int, kind: LookupKind, name: str
    ) -> tuple[LookupEntryMixin, bool]:
        """
        Add a name to a list unless it is already there.

        Returns the entry and whether it was created.
        """
        existing = self._find_by_name(owner_id, kind, name)
        if existing:
            return existing, False

        entry = LOOKUP_MODELS[kind](account_id=owner_id, name=name)
        try:
            # Savepoint: a clash undoes this insert only, not the
            # caller's transaction
            with self.db.begin_nested():
                self.db.add(entry)
        except IntegrityError:
            # A concurrent request inserted the same name first
            return self._find_by_name(owner_id, kind, name), False
        return entry, True

    def rename_entry(
        self, owner_id: int, kind: LookupKind, entry_id: int, name: str
    ) -> bool:
        """
        Rename an entry.

        Raises Conflict if the owner already has another entry
        with the new name.
        """
        model = LOOKUP_MODELS[kind]
        clash = self._find_by_name(owner_id, kind, name)
        if clash is not None and clash.id != entry_id:
            raise Conflict(f"'{name}' already exists in {kind.value}")

        result = self.db.execute(
            update(model)
            .where(model.account_id == owner_id, model.id == entry_id)
            .values(name=name)
        )
        self.db.flush()
        return result.rowcount > 0

    def delete_entry(self, owner_id: int, kind: LookupKind, entry_id: int) -> bool:
        model = LOOKUP_MODELS[kind]
        result = self.db.execute(
            delete(model).where(model.account_id == owner_id, model.id == entry_id)
        )
        self.db.flush()
        return result.rowcount > 0
