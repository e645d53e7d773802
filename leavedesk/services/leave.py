"""Leave service: apply, approve or reject, and summarize leave requests.

Composes the date range validator, overlap detector, balance ledger and
request store. Every check runs before anything is mutated, so a failed call
leaves the store and balances untouched.
"""

from __future__ import annotations

import calendar
import logging
import threading
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from leavedesk.exceptions import AppError, LeaveError
from leavedesk.models.enums import DecisionAction, LeaveErrorCode, LeaveStatus
from leavedesk.models.request import LeaveRequest, inclusive_days
from leavedesk.schemas.request import (
    DecisionResponse,
    EmployeeRef,
    LeaveRequestResponse,
    LeaveRequestWithEmployeeResponse,
    MonthlySummaryResponse,
    RequestListResponse,
)
from leavedesk.services.balance import BalanceLedger
from leavedesk.services.overlap import check_overlap
from leavedesk.services.validation import validate_date_range

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from leavedesk.schemas.request import ApplyLeavePayload
    from leavedesk.services.store import LeaveRequestStore
    from leavedesk.services.user import UserDirectory

logger = logging.getLogger(__name__)

DEFAULT_REJECTION_REASON = "No reason provided"

_DECISION_MESSAGES = {
    DecisionAction.APPROVE: "Leave request approved successfully",
    DecisionAction.REJECT: "Leave request rejected successfully",
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _build_request_response(request: LeaveRequest) -> LeaveRequestResponse:
    """Map a request model to its response schema."""
    return LeaveRequestResponse(
        id=request.id,
        employee_id=request.employee_id,
        start_date=request.start_date,
        end_date=request.end_date,
        reason=request.reason,
        type=request.type,
        status=request.status,
        approved_by=request.approved_by,
        approved_at=request.approved_at,
        rejection_reason=request.rejection_reason,
        created_at=request.created_at,
        updated_at=request.updated_at,
        duration=request.duration,
    )


class LeaveService:
    """Leave workflow over an explicit user directory and request store."""

    def __init__(
        self,
        users: UserDirectory,
        store: LeaveRequestStore,
        ledger: BalanceLedger | None = None,
        clock: Callable[[], date] = date.today,
        default_rejection_reason: str = DEFAULT_REJECTION_REASON,
    ) -> None:
        self.users = users
        self.store = store
        self.ledger = ledger or BalanceLedger()
        self.clock = clock
        self.default_rejection_reason = default_rejection_reason
        self._lock = threading.Lock()

    def _annotate(self, requests: Iterable[LeaveRequest]) -> list[LeaveRequestWithEmployeeResponse]:
        """Attach employee identity to each request; unknown employees get None."""
        items = []
        for request in requests:
            employee = self.users.get_user(request.employee_id)
            ref = EmployeeRef(id=employee.id, name=employee.name, email=employee.email) if employee else None
            items.append(
                LeaveRequestWithEmployeeResponse(
                    **_build_request_response(request).model_dump(),
                    employee=ref,
                )
            )
        return items

    def _list_response(self, requests: list[LeaveRequest]) -> RequestListResponse:
        items = self._annotate(requests)
        return RequestListResponse(items=items, total=len(items))

    # -----------------------------------------------------------------------
    # Commands
    # -----------------------------------------------------------------------

    def apply(self, employee_id: str, payload: ApplyLeavePayload) -> LeaveRequestResponse:
        """Submit a leave request for an employee.

        Flow:
        1. Resolve the employee
        2. Validate the date range against today
        3. Check for overlap with the employee's approved requests
        4. Check the balance covers the duration (nothing is debited)
        5. Insert a pending request
        """
        with self._lock:
            employee = self.users.get_user(employee_id)
            if employee is None:
                raise LeaveError(LeaveErrorCode.EMPLOYEE_NOT_FOUND)

            result = validate_date_range(payload.start_date, payload.end_date, self.clock())
            if not result.valid or result.start_date is None or result.end_date is None:
                raise LeaveError(result.error or LeaveErrorCode.INVALID_RANGE)
            start_date, end_date = result.start_date, result.end_date

            overlap = check_overlap(start_date, end_date, self.store.find_by_employee(employee_id))
            if overlap.overlap:
                conflict_id = overlap.conflict.id if overlap.conflict else None
                logger.info("Leave application for %s overlaps approved request %s", employee_id, conflict_id)
                raise LeaveError(LeaveErrorCode.DATE_OVERLAP)

            duration = inclusive_days(start_date, end_date)
            if not self.ledger.has_sufficient_balance(employee, duration):
                raise LeaveError(LeaveErrorCode.INSUFFICIENT_BALANCE)

            request = LeaveRequest(
                employee_id=employee_id,
                start_date=start_date,
                end_date=end_date,
                reason=payload.reason,
                type=payload.type,
                status=LeaveStatus.PENDING,
            )
            self.store.insert(request)
            logger.info(
                "Leave request %s submitted by %s for %d day(s) from %s",
                request.id,
                employee_id,
                duration,
                start_date,
            )
            return _build_request_response(request)

    def approve_or_reject(
        self,
        request_id: str,
        approver_id: str,
        action: str,
        rejection_reason: str | None = None,
    ) -> DecisionResponse:
        """Resolve a pending request.

        Approval re-checks the balance as it stands now, then debits the
        request's duration. Rejection never touches the balance and falls
        back to a placeholder reason when none is given.
        """
        with self._lock:
            request = self.store.find_by_id(request_id)
            if request is None:
                raise LeaveError(LeaveErrorCode.REQUEST_NOT_FOUND)

            if request.status != LeaveStatus.PENDING:
                raise LeaveError(LeaveErrorCode.ALREADY_PROCESSED)

            employee = self.users.get_user(request.employee_id)
            if employee is None:
                raise LeaveError(LeaveErrorCode.EMPLOYEE_NOT_FOUND)

            now = datetime.now(UTC)

            if action == DecisionAction.APPROVE:
                duration = request.duration
                if not self.ledger.has_sufficient_balance(employee, duration):
                    raise LeaveError(LeaveErrorCode.INSUFFICIENT_BALANCE)

                balance_before = employee.leave_balance
                self.ledger.debit(employee, duration)
                resolved = request.model_copy(
                    update={
                        "status": LeaveStatus.APPROVED,
                        "approved_by": approver_id,
                        "approved_at": now,
                        "updated_at": now,
                    }
                )
                self.store.update(resolved)
                self.users.update_user(employee)
                logger.info(
                    "Approved leave request %s for %s: balance %d -> %d (%d day(s))",
                    request_id,
                    employee.id,
                    balance_before,
                    employee.leave_balance,
                    duration,
                )
                return DecisionResponse(
                    message=_DECISION_MESSAGES[DecisionAction.APPROVE],
                    request=_build_request_response(resolved),
                )

            if action == DecisionAction.REJECT:
                resolved = request.model_copy(
                    update={
                        "status": LeaveStatus.REJECTED,
                        "approved_by": approver_id,
                        "approved_at": now,
                        "rejection_reason": rejection_reason or self.default_rejection_reason,
                        "updated_at": now,
                    }
                )
                self.store.update(resolved)
                logger.info("Rejected leave request %s for %s", request_id, employee.id)
                return DecisionResponse(
                    message=_DECISION_MESSAGES[DecisionAction.REJECT],
                    request=_build_request_response(resolved),
                )

            raise LeaveError(LeaveErrorCode.INVALID_ACTION)

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def monthly_summary(self, year: int, month: int) -> MonthlySummaryResponse:
        """Requests whose start date falls in the given month, counted by status."""
        if not 1 <= year <= 9999:
            raise AppError("Year must be between 1 and 9999", status_code=400)
        if not 1 <= month <= 12:
            raise AppError("Month must be between 1 and 12", status_code=400)

        first_day = date(year, month, 1)
        last_day = date(year, month, calendar.monthrange(year, month)[1])

        monthly = [r for r in self.store.list_all() if first_day <= r.start_date <= last_day]

        return MonthlySummaryResponse(
            year=year,
            month=month,
            total_requests=len(monthly),
            approved_requests=sum(1 for r in monthly if r.status == LeaveStatus.APPROVED),
            rejected_requests=sum(1 for r in monthly if r.status == LeaveStatus.REJECTED),
            pending_requests=sum(1 for r in monthly if r.status == LeaveStatus.PENDING),
            requests=self._annotate(monthly),
        )

    def list_pending(self) -> RequestListResponse:
        return self._list_response([r for r in self.store.list_all() if r.status == LeaveStatus.PENDING])

    def list_all(self) -> RequestListResponse:
        return self._list_response(self.store.list_all())

    def list_by_employee(self, employee_id: str) -> RequestListResponse:
        """Requests submitted by one employee, oldest first."""
        return self._list_response(self.store.find_by_employee(employee_id))

    def get_request(self, request_id: str) -> LeaveRequestWithEmployeeResponse:
        """Get a single request by ID."""
        request = self.store.find_by_id(request_id)
        if request is None:
            raise LeaveError(LeaveErrorCode.REQUEST_NOT_FOUND)
        return self._annotate([request])[0]
