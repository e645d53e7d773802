from __future__ import annotations

from fastapi import APIRouter

from leavedesk.api.deps import AuthDep, ManagerDep, UserDirectoryDep
from leavedesk.exceptions import AppError
from leavedesk.models.user import User
from leavedesk.schemas.user import UpsertUserRequest, UserListResponse, UserResponse

users_router = APIRouter(prefix="/users", tags=["users"])


def _build_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        department=user.department,
        leave_balance=user.leave_balance,
        created_at=user.created_at,
    )


@users_router.get("/me", response_model=UserResponse)
async def get_profile(
    users: UserDirectoryDep,
    auth: AuthDep,
) -> UserResponse:
    """Get the authenticated user's profile, including remaining leave balance."""
    user = users.get_user(auth.user_id)
    if user is None:
        raise AppError("User not found", status_code=404)
    return _build_user_response(user)


@users_router.get("", response_model=UserListResponse)
async def list_users(
    users: UserDirectoryDep,
    auth: AuthDep,
) -> UserListResponse:
    """List all users."""
    items = [_build_user_response(u) for u in users.list_users()]
    return UserListResponse(items=items, total=len(items))


@users_router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    users: UserDirectoryDep,
    auth: ManagerDep,
) -> UserResponse:
    """Get a user (manager only)."""
    user = users.get_user(user_id)
    if user is None:
        raise AppError("User not found", status_code=404)
    return _build_user_response(user)


@users_router.put("/{user_id}", response_model=UserResponse)
async def upsert_user(
    user_id: str,
    payload: UpsertUserRequest,
    users: UserDirectoryDep,
    auth: ManagerDep,
) -> UserResponse:
    """Create or update a user in the stub directory (manager only).

    An omitted leave_balance keeps the existing balance, or the configured
    default for a new user.
    """
    existing = users.get_user(user_id)
    if payload.leave_balance is not None:
        balance = payload.leave_balance
    elif existing is not None:
        balance = existing.leave_balance
    else:
        balance = users.default_leave_balance
    user = User(
        id=user_id,
        name=payload.name,
        email=payload.email,
        role=payload.role,
        department=payload.department,
        leave_balance=balance,
    )
    if existing is not None:
        user.created_at = existing.created_at
    users.seed(user)
    return _build_user_response(user)
