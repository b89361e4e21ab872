"""In-memory implementation of UserStore for testing."""

from datetime import datetime


class FakeUserStore:
    def __init__(self):
        self.store: dict[str, dict] = {}
        self.list_calls = 0

    def add(self, user_id: str, email: str, role: str = 'user', created_at: datetime | None = None,
            first_name: str = '', last_name: str = '') -> None:
        self.store[user_id] = {
            'id': user_id,
            'email': email,
            'firstName': first_name,
            'lastName': last_name,
            'role': role,
            'createdAt': (created_at or datetime.now()).isoformat(),
            'updatedAt': (created_at or datetime.now()).isoformat(),
        }

    def get_role(self, user_id: str) -> str | None:
        user = self.store.get(user_id)
        return user['role'] if user else None

    def list_users(self) -> list[dict]:
        self.list_calls += 1
        return sorted(self.store.values(), key=lambda u: u['createdAt'], reverse=True)
