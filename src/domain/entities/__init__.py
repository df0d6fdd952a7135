"""
Referral Service Domain Entities
"""

from .enums import MemberStatus, SortDirection
from .member import Member

__all__ = [
    # Enums
    "MemberStatus",
    "SortDirection",
    # Entities
    "Member",
]
