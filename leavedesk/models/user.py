from __future__ import annotations

from sqlmodel import Field

from leavedesk.models.base import IdentifiedBase, TimestampMixin
from leavedesk.models.enums import UserRole


class User(IdentifiedBase, TimestampMixin):
    """An employee or manager together with their remaining leave days."""

    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=1, max_length=255)
    role: UserRole = UserRole.EMPLOYEE
    department: str = ""
    leave_balance: int = Field(default=20, ge=0)
