# ruff: noqa: TC003
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from leavedesk.models.enums import UserRole


class UpsertUserRequest(BaseModel):
    """Request body for upserting a user in the stub directory."""

    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=1, max_length=255)
    role: UserRole = UserRole.EMPLOYEE
    department: str = Field(default="", max_length=100)
    leave_balance: int | None = Field(default=None, ge=0)


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: str
    name: str
    email: str
    role: UserRole
    department: str
    leave_balance: int
    created_at: datetime


class UserListResponse(BaseModel):
    """List of users."""

    items: list[UserResponse]
    total: int
