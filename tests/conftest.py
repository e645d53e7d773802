from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from leavedesk.config import Settings
from leavedesk.main import create_app
from leavedesk.models.enums import UserRole
from leavedesk.models.user import User
from leavedesk.services.leave import LeaveService
from leavedesk.services.store import LeaveRequestStore
from leavedesk.services.user import InMemoryUserDirectory

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

# A fixed "today" keeps date validation deterministic. 2026-03-02 is a Monday.
TODAY = date(2026, 3, 2)

EMPLOYEE_ID = "emp-1"
OTHER_EMPLOYEE_ID = "emp-2"
MANAGER_ID = "mgr-1"

EMPLOYEE_HEADERS = {"X-User-Id": EMPLOYEE_ID, "X-Role": "employee"}
MANAGER_HEADERS = {"X-User-Id": MANAGER_ID, "X-Role": "manager"}


def make_user(
    user_id: str = EMPLOYEE_ID,
    name: str = "Jane Doe",
    role: UserRole = UserRole.EMPLOYEE,
    leave_balance: int = 20,
) -> User:
    return User(
        id=user_id,
        name=name,
        email=f"{user_id}@example.com",
        role=role,
        department="Engineering",
        leave_balance=leave_balance,
    )


def seed_default_users(users: InMemoryUserDirectory) -> None:
    users.seed(make_user(EMPLOYEE_ID, "Jane Doe"))
    users.seed(make_user(OTHER_EMPLOYEE_ID, "Bob Smith", leave_balance=5))
    users.seed(make_user(MANAGER_ID, "Mary Manager", role=UserRole.MANAGER, leave_balance=25))


@pytest.fixture
def users() -> InMemoryUserDirectory:
    """Fresh user directory holding two employees and a manager."""
    directory = InMemoryUserDirectory()
    seed_default_users(directory)
    return directory


@pytest.fixture
def store() -> LeaveRequestStore:
    return LeaveRequestStore()


@pytest.fixture
def service(users: InMemoryUserDirectory, store: LeaveRequestStore) -> LeaveService:
    """Leave service over fresh stores with the clock pinned to TODAY."""
    return LeaveService(users, store, clock=lambda: TODAY)


@pytest.fixture
def app() -> FastAPI:
    """Application with empty stores, the default users, and a pinned clock."""
    application = create_app(Settings(seed_demo_data=False))
    seed_default_users(application.state.users)
    application.state.leave_service.clock = lambda: TODAY
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the application under test."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
