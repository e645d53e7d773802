"""Tests for the balance ledger."""

from __future__ import annotations

import pytest

from leavedesk.exceptions import LeaveError
from leavedesk.models.enums import LeaveErrorCode
from leavedesk.models.user import User
from leavedesk.services.balance import BalanceLedger


def _user(balance: int) -> User:
    return User(id="emp-1", name="Jane", email="jane@example.com", leave_balance=balance)


def test_sufficient_when_balance_equals_days() -> None:
    assert BalanceLedger().has_sufficient_balance(_user(5), 5)


def test_insufficient_when_balance_below_days() -> None:
    assert not BalanceLedger().has_sufficient_balance(_user(4), 5)


def test_debit_subtracts_days() -> None:
    user = _user(20)
    assert BalanceLedger().debit(user, 5) == 15
    assert user.leave_balance == 15


def test_debit_to_zero() -> None:
    user = _user(3)
    BalanceLedger().debit(user, 3)
    assert user.leave_balance == 0


def test_debit_never_goes_negative() -> None:
    user = _user(2)
    with pytest.raises(LeaveError) as exc_info:
        BalanceLedger().debit(user, 3)
    assert exc_info.value.code == LeaveErrorCode.INSUFFICIENT_BALANCE
    assert user.leave_balance == 2


def test_debit_rejects_negative_days() -> None:
    with pytest.raises(ValueError, match="negative"):
        BalanceLedger().debit(_user(2), -1)
