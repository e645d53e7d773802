"""Tests for overlap detection against approved leave."""

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

from leavedesk.models.enums import LeaveStatus
from leavedesk.models.request import LeaveRequest
from leavedesk.services.overlap import check_overlap, ranges_overlap


def _request(
    start_day: int,
    end_day: int,
    status: LeaveStatus = LeaveStatus.APPROVED,
    request_id: str | None = None,
) -> LeaveRequest:
    kwargs = {"id": request_id} if request_id else {}
    return LeaveRequest(
        employee_id="emp-1",
        start_date=date(2026, 4, start_day),
        end_date=date(2026, 4, end_day),
        reason="Holiday",
        status=status,
        **kwargs,
    )


def _d(day: int) -> date:
    return date(2026, 4, day)


# ---------------------------------------------------------------------------
# ranges_overlap
# ---------------------------------------------------------------------------


def test_touching_endpoints_overlap() -> None:
    assert ranges_overlap(_d(10), _d(15), _d(15), _d(20))
    assert ranges_overlap(_d(15), _d(20), _d(10), _d(15))


def test_adjacent_ranges_do_not_overlap() -> None:
    assert not ranges_overlap(_d(10), _d(15), _d(16), _d(20))
    assert not ranges_overlap(_d(16), _d(20), _d(10), _d(15))


def test_contained_range_overlaps() -> None:
    assert ranges_overlap(_d(12), _d(13), _d(10), _d(20))


# ---------------------------------------------------------------------------
# check_overlap
# ---------------------------------------------------------------------------


def test_empty_existing_has_no_overlap() -> None:
    result = check_overlap(_d(1), _d(5), [])
    assert not result.overlap
    assert result.conflict is None


def test_approved_touching_request_conflicts() -> None:
    existing = _request(10, 15)
    result = check_overlap(_d(15), _d(20), [existing])
    assert result.overlap
    assert result.conflict is existing


def test_approved_adjacent_request_does_not_conflict() -> None:
    result = check_overlap(_d(16), _d(20), [_request(10, 15)])
    assert not result.overlap


def test_pending_and_rejected_requests_never_block() -> None:
    existing = [_request(10, 15, LeaveStatus.PENDING), _request(10, 15, LeaveStatus.REJECTED)]
    assert not check_overlap(_d(10), _d(15), existing).overlap


def test_first_conflict_in_supplied_order_wins() -> None:
    later_dates = _request(18, 20, request_id="first")
    earlier_dates = _request(10, 12, request_id="second")
    result = check_overlap(_d(1), _d(30), [later_dates, earlier_dates])
    assert result.conflict is not None
    assert result.conflict.id == "first"


def test_unreadable_stored_dates_are_skipped() -> None:
    broken = SimpleNamespace(
        id="broken",
        employee_id="emp-1",
        start_date="not-a-date",
        end_date="also-not-a-date",
        reason="Legacy row",
        status=LeaveStatus.APPROVED,
    )
    valid = _request(10, 12, request_id="valid")
    result = check_overlap(_d(1), _d(30), [broken, valid])  # type: ignore[list-item]
    assert result.conflict is not None
    assert result.conflict.id == "valid"


def test_stored_string_dates_are_parsed() -> None:
    legacy = SimpleNamespace(
        id="legacy",
        employee_id="emp-1",
        start_date="2026-04-10",
        end_date="2026-04-12",
        reason="Legacy row",
        status=LeaveStatus.APPROVED,
    )
    assert check_overlap(_d(12), _d(14), [legacy]).overlap  # type: ignore[list-item]
