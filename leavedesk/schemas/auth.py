from __future__ import annotations

from pydantic import BaseModel

from leavedesk.models.enums import UserRole


class AuthContext(BaseModel):
    """Dev auth context extracted from request headers."""

    user_id: str
    role: UserRole = UserRole.EMPLOYEE
