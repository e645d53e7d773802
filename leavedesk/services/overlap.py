"""Overlap detection between a proposed leave and existing approved leave."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from leavedesk.models.enums import LeaveStatus
from leavedesk.services.validation import parse_leave_date

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from leavedesk.models.request import LeaveRequest


@dataclass(frozen=True)
class OverlapResult:
    """Outcome of an overlap scan."""

    overlap: bool
    conflict: LeaveRequest | None = None


def ranges_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """Inclusive interval intersection: touching endpoints overlap."""
    return a_start <= b_end and a_end >= b_start


def check_overlap(
    new_start: date,
    new_end: date,
    existing_requests: Iterable[LeaveRequest],
) -> OverlapResult:
    """Return the first approved request in the given order that intersects [new_start, new_end].

    Pending and rejected requests never block. Requests whose stored dates
    cannot be read are skipped.
    """
    for request in existing_requests:
        if request.status != LeaveStatus.APPROVED:
            continue

        existing_start = parse_leave_date(request.start_date)
        existing_end = parse_leave_date(request.end_date)
        if existing_start is None or existing_end is None:
            continue

        if ranges_overlap(new_start, new_end, existing_start, existing_end):
            return OverlapResult(overlap=True, conflict=request)

    return OverlapResult(overlap=False)
