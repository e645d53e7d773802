from sqlmodel import SQLModel

from leavedesk.models.base import IdentifiedBase, TimestampMixin
from leavedesk.models.enums import (
    DecisionAction,
    LeaveErrorCode,
    LeaveStatus,
    LeaveType,
    UserRole,
)
from leavedesk.models.request import LeaveRequest
from leavedesk.models.user import User

__all__ = [
    "DecisionAction",
    "IdentifiedBase",
    "LeaveErrorCode",
    "LeaveRequest",
    "LeaveStatus",
    "LeaveType",
    "SQLModel",
    "TimestampMixin",
    "User",
    "UserRole",
]
