"""In-memory leave request store.

Records are kept in insertion order and are never removed. Only the
resolution fields of a record may change after it is inserted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from leavedesk.models.request import LeaveRequest

_IMMUTABLE_FIELDS = ("employee_id", "start_date", "end_date")


class LeaveRequestStore:
    """Append-only collection of leave requests keyed by request id."""

    def __init__(self) -> None:
        self._requests: dict[str, LeaveRequest] = {}

    def __len__(self) -> int:
        return len(self._requests)

    def insert(self, request: LeaveRequest) -> LeaveRequest:
        """Add a new request. Raises ValueError if the id is already taken."""
        if request.id in self._requests:
            msg = f"Leave request {request.id} already exists"
            raise ValueError(msg)
        self._requests[request.id] = request
        return request

    def find_by_id(self, request_id: str) -> LeaveRequest | None:
        return self._requests.get(request_id)

    def find_by_employee(self, employee_id: str) -> list[LeaveRequest]:
        """All requests for an employee in insertion order."""
        return [r for r in self._requests.values() if r.employee_id == employee_id]

    def list_all(self) -> list[LeaveRequest]:
        return list(self._requests.values())

    def update(self, request: LeaveRequest) -> LeaveRequest:
        """Replace the stored record for request.id with its new resolution state.

        Raises KeyError if the request is unknown and ValueError if the
        update would change its owner or dates.
        """
        current = self._requests.get(request.id)
        if current is None:
            raise KeyError(request.id)
        for field_name in _IMMUTABLE_FIELDS:
            if getattr(current, field_name) != getattr(request, field_name):
                msg = f"Cannot change {field_name} of leave request {request.id}"
                raise ValueError(msg)
        self._requests[request.id] = request
        return request
