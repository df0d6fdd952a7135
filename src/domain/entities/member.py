"""
Member Entity

A registered producer member of the referral network.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import generate_uuid

from .enums import MemberStatus


class Member(SQLModel, table=True):
    """
    Member entity - a producer who joined through someone's invite code.

    Business Rules:
    - id is opaque and never reused
    - invite_code_self is the code this member hands out; unique when present
    - invite_code is the code this member registered with (their recruiter's)
    - status is kept as stored; values outside MemberStatus are passed through
    - deleted is a status value, rows are never removed
    - extra holds open profile attributes, including legacy invite code aliases
    """

    __tablename__ = "producer_members"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=64)

    # Profile
    full_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, index=True, max_length=255)
    whatsapp: Optional[str] = Field(default=None, max_length=64)
    country: Optional[str] = Field(default=None, max_length=100)
    province: Optional[str] = Field(default=None, max_length=100)
    city: Optional[str] = Field(default=None, max_length=100)
    address: Optional[str] = Field(default=None, max_length=255)

    # Referral codes
    invite_code: Optional[str] = Field(default=None, index=True, max_length=64)
    invite_code_self: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )

    status: str = Field(default=MemberStatus.pending.value, max_length=32)
    invited_selected: bool = Field(default=False)

    extra: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_member_status", "status"),
        Index("idx_member_created_at", "created_at"),
    )

    def as_row(self) -> Dict[str, Any]:
        """Open attribute mapping: extra attributes overlaid by set columns."""
        row: Dict[str, Any] = dict(self.extra or {})
        for key, value in self.model_dump(exclude={"extra"}).items():
            if value is not None or key not in row:
                row[key] = value
        return row
