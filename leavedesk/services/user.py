from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from leavedesk.models.user import User


@runtime_checkable
class UserDirectory(Protocol):
    """Interface for looking up employees and managers."""

    def get_user(self, user_id: str) -> User | None:
        """Fetch a user. Returns None if not found."""
        ...

    def list_users(self) -> list[User]:
        """List all users."""
        ...

    def update_user(self, user: User) -> None:
        """Persist changes to an existing user."""
        ...


class InMemoryUserDirectory:
    """In-memory user directory for development and tests."""

    def __init__(self, default_leave_balance: int = 20) -> None:
        self.default_leave_balance = default_leave_balance
        self._users: dict[str, User] = {}

    def seed(self, user: User) -> None:
        """Add or replace a user."""
        self._users[user.id] = user

    def get_user(self, user_id: str) -> User | None:
        """Fetch a user. Returns None if not found."""
        return self._users.get(user_id)

    def list_users(self) -> list[User]:
        """List all users."""
        return list(self._users.values())

    def update_user(self, user: User) -> None:
        """Persist changes to an existing user. Unknown users are ignored."""
        if user.id in self._users:
            self._users[user.id] = user
