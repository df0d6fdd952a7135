"""
Referral Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MemberStatus(str, Enum):
    """Member lifecycle status"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    deleted = "deleted"


class SortDirection(str, Enum):
    """Listing sort direction"""

    asc = "asc"
    desc = "desc"
