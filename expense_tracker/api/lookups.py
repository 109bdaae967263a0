"""
Lookup list endpoints (responsible parties, categories, locations).

The list kind is a path segment; an unknown kind is a 400.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from expense_tracker.api.deps import get_current_account, to_http_error
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.models.account import Account
from expense_tracker.models.base import get_db
from expense_tracker.models.enums import LookupKind
from expense_tracker.schemas.common import OkResponse
from expense_tracker.schemas.lookup import (
    LookupEntryListResponse,
    LookupEntryResponse,
    LookupListResponse,
    LookupNameRequest,
)
from expense_tracker.services.lookup_service import LookupService

router = APIRouter(prefix="/lookups", tags=["Lookups"])


def _entries(entries) -> list[LookupEntryResponse]:
    return [LookupEntryResponse.model_validate(e) for e in entries]


@router.get("", response_model=LookupListResponse)
def list_all_lookups(
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    """All three lists for the caller, each sorted by name."""
    lists = LookupService(db).list_all(account.id)
    return LookupListResponse(
        responsible_parties=_entries(lists[LookupKind.RESPONSIBLE_PARTY]),
        categories=_entries(lists[LookupKind.CATEGORY]),
        locations=_entries(lists[LookupKind.LOCATION]),
    )


@router.get("/{kind}", response_model=LookupEntryListResponse)
def list_lookups(
    kind: LookupKind,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    entries = LookupService(db).list_entries(account.id, kind)
    return LookupEntryListResponse(entries=_entries(entries))


@router.post("/{kind}", response_model=OkResponse)
def add_lookup(
    kind: LookupKind,
    request: LookupNameRequest,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    """Add a name; adding one that already exists is a no-op."""
    service = LookupService(db)
    entry, created = service.add_entry(account.id, kind, request.name)
    db.commit()
    return OkResponse(id=entry.id if created else None)


@router.put("/{kind}/{entry_id}", response_model=OkResponse)
def rename_lookup(
    kind: LookupKind,
    entry_id: int,
    request: LookupNameRequest,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    """
    Rename an entry.

    Expenses already recorded with the old name keep it.
    """
    service = LookupService(db)
    try:
        service.rename_entry(account.id, kind, entry_id, request.name)
        db.commit()
        return OkResponse()
    except ExpenseTrackerError as e:
        db.rollback()
        raise to_http_error(e)


@router.delete("/{kind}/{entry_id}", response_model=OkResponse)
def delete_lookup(
    kind: LookupKind,
    entry_id: int,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    service = LookupService(db)
    service.delete_entry(account.id, kind, entry_id)
    db.commit()
    return OkResponse()
