from typing import Any, Protocol


class UserStore(Protocol):
    """Protocol defining the backing store read by the admin users endpoint."""

    def get_role(self, user_id: str) -> str | None:
        """Return the user's role, or None if the user does not exist."""
        ...

    def list_users(self) -> list[dict[str, Any]]:
        """Return all users, newest first, projected to the public field set."""
        ...
