# ruff: noqa: B008
from __future__ import annotations

from fastapi import APIRouter, Query, status

from leavedesk.api.deps import AuthDep, EmployeeDep, LeaveServiceDep, ManagerDep
from leavedesk.schemas.request import (
    ApplyLeavePayload,
    DecisionPayload,
    DecisionResponse,
    LeaveRequestResponse,
    LeaveRequestWithEmployeeResponse,
    MonthlySummaryResponse,
    RequestListResponse,
)

leaves_router = APIRouter(prefix="/leaves", tags=["leaves"])


@leaves_router.post("", response_model=LeaveRequestResponse, status_code=status.HTTP_201_CREATED)
async def apply_for_leave(
    payload: ApplyLeavePayload,
    service: LeaveServiceDep,
    auth: EmployeeDep,
) -> LeaveRequestResponse:
    """Apply for leave as the authenticated employee."""
    return service.apply(auth.user_id, payload)


@leaves_router.get("", response_model=RequestListResponse)
async def list_leave_requests(
    service: LeaveServiceDep,
    auth: AuthDep,
) -> RequestListResponse:
    """List every leave request."""
    return service.list_all()


@leaves_router.get("/my", response_model=RequestListResponse)
async def list_my_leave_requests(
    service: LeaveServiceDep,
    auth: EmployeeDep,
) -> RequestListResponse:
    """List the authenticated employee's own leave requests."""
    return service.list_by_employee(auth.user_id)


@leaves_router.get("/pending", response_model=RequestListResponse)
async def list_pending_leave_requests(
    service: LeaveServiceDep,
    auth: ManagerDep,
) -> RequestListResponse:
    """List requests awaiting a decision (manager only)."""
    return service.list_pending()


@leaves_router.get("/summary", response_model=MonthlySummaryResponse)
async def monthly_summary(
    service: LeaveServiceDep,
    auth: AuthDep,
    year: int = Query(ge=1, le=9999),
    month: int = Query(ge=1, le=12),
) -> MonthlySummaryResponse:
    """Summarize requests starting in the given month."""
    return service.monthly_summary(year, month)


@leaves_router.get("/{request_id}", response_model=LeaveRequestWithEmployeeResponse)
async def get_leave_request(
    request_id: str,
    service: LeaveServiceDep,
    auth: ManagerDep,
) -> LeaveRequestWithEmployeeResponse:
    """Get a single leave request (manager only)."""
    return service.get_request(request_id)


@leaves_router.post("/{request_id}/decision", response_model=DecisionResponse)
async def decide_leave_request(
    request_id: str,
    payload: DecisionPayload,
    service: LeaveServiceDep,
    auth: ManagerDep,
) -> DecisionResponse:
    """Approve or reject a pending leave request (manager only)."""
    return service.approve_or_reject(request_id, auth.user_id, payload.action, payload.rejection_reason)
