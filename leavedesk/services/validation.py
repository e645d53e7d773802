"""Date range validation for leave applications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from pydantic import TypeAdapter, ValidationError

from leavedesk.models.enums import LeaveErrorCode

_date_adapter: TypeAdapter[date] = TypeAdapter(date)
_datetime_adapter: TypeAdapter[datetime] = TypeAdapter(datetime)


@dataclass(frozen=True)
class DateRangeResult:
    """Outcome of validating a proposed leave interval."""

    valid: bool
    error: LeaveErrorCode | None = None
    start_date: date | None = None
    end_date: date | None = None


def parse_leave_date(value: date | datetime | str | None) -> date | None:
    """Coerce a calendar date from a date, datetime or ISO string.

    Time of day is dropped. Returns None when the value cannot be read as a
    date or a datetime.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return _date_adapter.validate_python(value)
    except ValidationError:
        pass
    try:
        return _datetime_adapter.validate_python(value).date()
    except ValidationError:
        return None


def validate_date_range(
    start_date: date | datetime | str | None,
    end_date: date | datetime | str | None,
    today: date,
) -> DateRangeResult:
    """Check a proposed leave interval against today and its own ordering.

    An unreadable start date counts as lying arbitrarily far in the past and
    fails with PAST_DATE. An unreadable end date cannot be ordered after the
    start and fails with INVALID_RANGE.
    """
    start = parse_leave_date(start_date)
    if start is None or start < today:
        return DateRangeResult(valid=False, error=LeaveErrorCode.PAST_DATE)

    end = parse_leave_date(end_date)
    if end is None or end < start:
        return DateRangeResult(valid=False, error=LeaveErrorCode.INVALID_RANGE)

    return DateRangeResult(valid=True, start_date=start, end_date=end)
