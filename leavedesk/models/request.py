# ruff: noqa: TC003
from __future__ import annotations

from datetime import date, datetime

from sqlmodel import Field

from leavedesk.models.base import IdentifiedBase, TimestampMixin, _now_utc
from leavedesk.models.enums import LeaveStatus, LeaveType


def inclusive_days(start_date: date, end_date: date) -> int:
    """Number of calendar days in [start_date, end_date], both ends included."""
    return (end_date - start_date).days + 1


class LeaveRequest(IdentifiedBase, TimestampMixin):
    """An employee's leave request with approval workflow state."""

    employee_id: str = Field(min_length=1)
    start_date: date
    end_date: date
    reason: str = Field(min_length=1, max_length=500)
    type: LeaveType = LeaveType.ANNUAL
    status: LeaveStatus = LeaveStatus.PENDING
    approved_by: str | None = None
    approved_at: datetime | None = None
    rejection_reason: str | None = None
    updated_at: datetime = Field(default_factory=_now_utc)

    @property
    def duration(self) -> int:
        """Inclusive day count between start_date and end_date."""
        return inclusive_days(self.start_date, self.end_date)
