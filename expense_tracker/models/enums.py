"""
Shared enumerations for database models.
"""

import enum


class Role(str, enum.Enum):
    """What an account is allowed to do."""
    ADMIN = "admin"
    USER = "user"


class LookupKind(str, enum.Enum):
    """
    The three per-account lookup lists.

    The value is the path segment used by the API.
    """
    RESPONSIBLE_PARTY = "responsible-parties"
    CATEGORY = "categories"
    LOCATION = "locations"
