from __future__ import annotations

import enum


class UserRole(enum.StrEnum):
    """Role of a user in the leave workflow."""

    EMPLOYEE = "employee"
    MANAGER = "manager"


class LeaveType(enum.StrEnum):
    """Kind of leave being requested."""

    ANNUAL = "annual"
    SICK = "sick"
    PERSONAL = "personal"


class LeaveStatus(enum.StrEnum):
    """State machine for leave requests. Approved and rejected are terminal."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class DecisionAction(enum.StrEnum):
    """Manager decision on a pending request."""

    APPROVE = "approve"
    REJECT = "reject"


class LeaveErrorCode(enum.StrEnum):
    """Business-rule failure reasons surfaced to callers."""

    EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"
    REQUEST_NOT_FOUND = "REQUEST_NOT_FOUND"
    PAST_DATE = "PAST_DATE"
    INVALID_RANGE = "INVALID_RANGE"
    DATE_OVERLAP = "DATE_OVERLAP"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    ALREADY_PROCESSED = "ALREADY_PROCESSED"
    INVALID_ACTION = "INVALID_ACTION"
