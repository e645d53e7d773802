from __future__ import annotations

from typing import TYPE_CHECKING

from leavedesk.exceptions import LeaveError
from leavedesk.models.enums import LeaveErrorCode

if TYPE_CHECKING:
    from leavedesk.models.user import User


class BalanceLedger:
    """Leave-day accounting against a user's remaining balance.

    Balance is only debited when a request is approved. Nothing is held
    while a request is pending.
    """

    def has_sufficient_balance(self, employee: User, days: int) -> bool:
        return employee.leave_balance >= days

    def debit(self, employee: User, days: int) -> int:
        """Subtract days from the employee's balance and return the new balance."""
        if days < 0:
            msg = "Cannot debit a negative number of days"
            raise ValueError(msg)
        if not self.has_sufficient_balance(employee, days):
            raise LeaveError(LeaveErrorCode.INSUFFICIENT_BALANCE)
        employee.leave_balance -= days
        return employee.leave_balance
