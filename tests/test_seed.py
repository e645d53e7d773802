"""Tests for the demo data loader and application wiring."""

from __future__ import annotations

from datetime import date

import pytest

from leavedesk.config import Settings
from leavedesk.exceptions import LeaveError
from leavedesk.main import build_leave_service, create_app
from leavedesk.models.enums import LeaveErrorCode, LeaveStatus, UserRole
from leavedesk.schemas.request import ApplyLeavePayload
from leavedesk.seed import seed_demo_data
from leavedesk.services.leave import LeaveService
from leavedesk.services.store import LeaveRequestStore
from leavedesk.services.user import InMemoryUserDirectory

TODAY = date(2026, 3, 2)


def _seeded() -> tuple[InMemoryUserDirectory, LeaveRequestStore]:
    users = InMemoryUserDirectory()
    store = LeaveRequestStore()
    seed_demo_data(users, store, TODAY)
    return users, store


def test_seed_loads_users() -> None:
    users, _ = _seeded()
    loaded = users.list_users()
    assert len(loaded) == 5
    assert sum(1 for u in loaded if u.role == UserRole.MANAGER) == 2
    john = users.get_user("user-1")
    assert john is not None
    assert john.leave_balance == 18


def test_seed_loads_requests() -> None:
    _, store = _seeded()
    assert len(store) == 7
    assert [r.id for r in store.find_by_employee("user-1")] == ["leave-1", "leave-3", "leave-5", "leave-7"]
    assert store.find_by_id("leave-7").status == LeaveStatus.REJECTED  # type: ignore[union-attr]


def test_seed_is_relative_to_today() -> None:
    _, store = _seeded()
    first = store.find_by_id("leave-1")
    assert first is not None
    assert first.start_date == date(2026, 3, 9)
    assert first.duration == 3


def test_seed_twice_keeps_existing_requests() -> None:
    users, store = _seeded()
    seed_demo_data(users, store, TODAY)
    assert len(store) == 7
    assert len(users.list_users()) == 5


def test_seeded_october_summary() -> None:
    users, store = _seeded()
    service = LeaveService(users, store, clock=lambda: TODAY)
    summary = service.monthly_summary(2025, 10)
    assert summary.total_requests == 3
    assert summary.approved_requests == 1
    assert summary.pending_requests == 1
    assert summary.rejected_requests == 1


def test_seeded_approved_leave_blocks_overlap() -> None:
    """user-1 has approved leave from two weeks ago to last week."""
    users, store = _seeded()
    service = LeaveService(users, store, clock=lambda: date(2026, 2, 16))
    payload = ApplyLeavePayload(start_date="2026-02-20", end_date="2026-02-21", reason="Extra days")
    with pytest.raises(LeaveError) as exc_info:
        service.apply("user-1", payload)
    assert exc_info.value.code == LeaveErrorCode.DATE_OVERLAP


def test_seeded_pending_requests() -> None:
    users, store = _seeded()
    service = LeaveService(users, store, clock=lambda: TODAY)
    assert {r.id for r in service.list_pending().items} == {"leave-1", "leave-2", "leave-4", "leave-6"}


def test_build_leave_service_without_demo_data() -> None:
    service = build_leave_service(Settings(seed_demo_data=False, default_leave_balance=25))
    assert len(service.store) == 0
    assert service.users.list_users() == []


def test_build_leave_service_shares_clock_with_seed() -> None:
    service = build_leave_service(Settings(seed_demo_data=True), clock=lambda: TODAY)
    assert service.clock() == TODAY
    first = service.store.find_by_id("leave-1")
    assert first is not None
    assert first.start_date == date(2026, 3, 9)


def test_create_app_owns_fresh_stores() -> None:
    first = create_app(Settings(seed_demo_data=True))
    second = create_app(Settings(seed_demo_data=True))
    assert first.state.leave_service.store is not second.state.leave_service.store
    assert len(first.state.leave_service.store) == 7
