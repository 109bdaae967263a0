"""
Pydantic schemas for the per-account lookup lists.
"""

from pydantic import Field

from expense_tracker.schemas.common import ApiModel


class LookupNameRequest(ApiModel):
    name: str = Field(min_length=1, max_length=255)


class LookupEntryResponse(ApiModel):
    id: int
    name: str


class LookupEntryListResponse(ApiModel):
    entries: list[LookupEntryResponse]


class LookupListResponse(ApiModel):
    """All three lists at once, for filling in the expense form."""
    responsible_parties: list[LookupEntryResponse]
    categories: list[LookupEntryResponse]
    locations: list[LookupEntryResponse]
