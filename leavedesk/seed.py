"""Demo users and leave requests for development.

Loaded into fresh stores by the application factory when
``seed_demo_data`` is enabled. Relative dates are computed from ``today`` so
the demo always has upcoming pending requests to act on.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from leavedesk.models.enums import LeaveStatus, LeaveType, UserRole
from leavedesk.models.request import LeaveRequest
from leavedesk.models.user import User

if TYPE_CHECKING:
    from leavedesk.services.store import LeaveRequestStore
    from leavedesk.services.user import InMemoryUserDirectory

USERS = [
    {
        "id": "user-1",
        "name": "John Doe",
        "email": "john.doe@company.com",
        "role": UserRole.EMPLOYEE,
        "department": "Engineering",
        "leave_balance": 18,
    },
    {
        "id": "user-2",
        "name": "Jane Smith",
        "email": "jane.smith@company.com",
        "role": UserRole.EMPLOYEE,
        "department": "Marketing",
        "leave_balance": 15,
    },
    {
        "id": "user-3",
        "name": "Mike Johnson",
        "email": "mike.johnson@company.com",
        "role": UserRole.MANAGER,
        "department": "Engineering",
        "leave_balance": 22,
    },
    {
        "id": "user-4",
        "name": "Sarah Wilson",
        "email": "sarah.wilson@company.com",
        "role": UserRole.MANAGER,
        "department": "Marketing",
        "leave_balance": 20,
    },
    {
        "id": "user-5",
        "name": "David Brown",
        "email": "david.brown@company.com",
        "role": UserRole.EMPLOYEE,
        "department": "HR",
        "leave_balance": 12,
    },
]


def _demo_requests(today: date) -> list[LeaveRequest]:
    next_week = today + timedelta(days=7)
    last_week = today - timedelta(days=7)
    two_weeks_ago = today - timedelta(days=14)

    def _request(
        request_id: str,
        employee_id: str,
        start: date,
        end: date,
        reason: str,
        leave_type: LeaveType,
        status: LeaveStatus,
    ) -> LeaveRequest:
        return LeaveRequest(
            id=request_id,
            employee_id=employee_id,
            start_date=start,
            end_date=end,
            reason=reason,
            type=leave_type,
            status=status,
        )

    return [
        _request(
            "leave-1",
            "user-1",
            next_week,
            next_week + timedelta(days=2),
            "Family vacation",
            LeaveType.ANNUAL,
            LeaveStatus.PENDING,
        ),
        _request(
            "leave-2",
            "user-2",
            next_week + timedelta(days=3),
            next_week + timedelta(days=5),
            "Medical appointment",
            LeaveType.SICK,
            LeaveStatus.PENDING,
        ),
        _request(
            "leave-3",
            "user-1",
            two_weeks_ago,
            last_week,
            "Personal matters",
            LeaveType.PERSONAL,
            LeaveStatus.APPROVED,
        ),
        _request(
            "leave-4",
            "user-5",
            next_week + timedelta(days=7),
            next_week + timedelta(days=9),
            "Wedding",
            LeaveType.ANNUAL,
            LeaveStatus.PENDING,
        ),
        _request(
            "leave-5",
            "user-1",
            date(2025, 10, 15),
            date(2025, 10, 17),
            "Conference attendance",
            LeaveType.ANNUAL,
            LeaveStatus.APPROVED,
        ),
        _request(
            "leave-6",
            "user-2",
            date(2025, 10, 20),
            date(2025, 10, 22),
            "Personal leave",
            LeaveType.PERSONAL,
            LeaveStatus.PENDING,
        ),
        _request(
            "leave-7",
            "user-1",
            date(2025, 10, 29),
            date(2025, 10, 31),
            "Holiday break",
            LeaveType.ANNUAL,
            LeaveStatus.REJECTED,
        ),
    ]


def seed_demo_data(users: InMemoryUserDirectory, store: LeaveRequestStore, today: date) -> None:
    """Load the demo users and requests. Existing request ids are left alone."""
    for user in USERS:
        users.seed(User.model_validate(user))

    for request in _demo_requests(today):
        if store.find_by_id(request.id) is None:
            store.insert(request)
