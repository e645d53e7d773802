# ruff: noqa: TC001, TC003
from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field, computed_field

from leavedesk.models.enums import LeaveStatus, LeaveType

UNKNOWN_EMPLOYEE = "Unknown"

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class ApplyLeavePayload(BaseModel):
    """Request body for applying for leave.

    Dates are accepted as given and checked by the date range validator, so
    an unreadable date is reported as a business-rule failure rather than a
    schema error.
    """

    start_date: date | str
    end_date: date | str
    reason: str = Field(min_length=1, max_length=500)
    type: LeaveType = LeaveType.ANNUAL


class DecisionPayload(BaseModel):
    """Request body for approving or rejecting a leave request."""

    action: str
    rejection_reason: str | None = Field(default=None, max_length=500)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class EmployeeRef(BaseModel):
    """Identity of the employee a request belongs to."""

    id: str
    name: str
    email: str


class LeaveRequestResponse(BaseModel):
    """Response schema for a single leave request."""

    id: str
    employee_id: str
    start_date: date
    end_date: date
    reason: str
    type: LeaveType
    status: LeaveStatus
    approved_by: str | None
    approved_at: datetime | None
    rejection_reason: str | None
    created_at: datetime
    updated_at: datetime
    duration: int


class LeaveRequestWithEmployeeResponse(LeaveRequestResponse):
    """A leave request annotated with its employee, when the employee is known."""

    employee: EmployeeRef | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def employee_name(self) -> str:
        return self.employee.name if self.employee else UNKNOWN_EMPLOYEE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def employee_email(self) -> str:
        return self.employee.email if self.employee else UNKNOWN_EMPLOYEE


class RequestListResponse(BaseModel):
    """List of leave requests."""

    items: list[LeaveRequestWithEmployeeResponse]
    total: int


class DecisionResponse(BaseModel):
    """Outcome of an approve or reject action."""

    message: str
    request: LeaveRequestResponse


class MonthlySummaryResponse(BaseModel):
    """Leave requests starting in a calendar month, counted by status."""

    year: int
    month: int
    total_requests: int
    approved_requests: int
    rejected_requests: int
    pending_requests: int
    requests: list[LeaveRequestWithEmployeeResponse]
