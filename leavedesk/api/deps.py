from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, Request, status

from leavedesk.exceptions import AppError
from leavedesk.models.enums import UserRole
from leavedesk.schemas.auth import AuthContext
from leavedesk.services.leave import LeaveService
from leavedesk.services.user import InMemoryUserDirectory


async def get_auth_context(
    x_user_id: str = Header(min_length=1),
    x_role: UserRole = Header(default=UserRole.EMPLOYEE),
) -> AuthContext:
    """Extract dev auth context from request headers."""
    return AuthContext(user_id=x_user_id, role=x_role)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


async def require_manager(
    auth: AuthDep,
) -> AuthContext:
    """Require manager role for the request."""
    if auth.role != UserRole.MANAGER:
        raise AppError("Manager access required", status_code=status.HTTP_403_FORBIDDEN)
    return auth


ManagerDep = Annotated[AuthContext, Depends(require_manager)]


async def require_employee(
    auth: AuthDep,
) -> AuthContext:
    """Require employee role for the request."""
    if auth.role != UserRole.EMPLOYEE:
        raise AppError("Employee access required", status_code=status.HTTP_403_FORBIDDEN)
    return auth


EmployeeDep = Annotated[AuthContext, Depends(require_employee)]


def get_leave_service(request: Request) -> LeaveService:
    """Leave service owned by the running application."""
    service: LeaveService = request.app.state.leave_service
    return service


def get_user_directory(request: Request) -> InMemoryUserDirectory:
    """User directory owned by the running application."""
    users: InMemoryUserDirectory = request.app.state.users
    return users


LeaveServiceDep = Annotated[LeaveService, Depends(get_leave_service)]
UserDirectoryDep = Annotated[InMemoryUserDirectory, Depends(get_user_directory)]
