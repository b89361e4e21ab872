from dataclasses import dataclass

NO_NAME_AVAILABLE = 'No name available'


@dataclass(frozen=True)
class UserRecord:
    """Canonical platform user as displayed by the dashboard.

    Backend versions disagree on field names; every record is normalized
    into this shape before anything else looks at it.
    """
    id: str
    email: str
    display_name: str = NO_NAME_AVAILABLE
    first_name: str | None = None
    last_name: str | None = None
    created_at: str | None = None
    is_admin: bool = False
    provider_id: str | None = None
    role: str | None = None

    @property
    def full_name(self) -> str:
        """First and last name joined the way the search box sees them."""
        return f"{self.first_name or ''} {self.last_name or ''}"

    def to_raw(self) -> dict:
        """Serialize back into the camelCase shape the backend uses."""
        raw = {
            'id': self.id,
            'email': self.email,
            'createdAt': self.created_at,
            'isAdmin': self.is_admin,
        }
        if self.first_name is not None:
            raw['firstName'] = self.first_name
        if self.last_name is not None:
            raw['lastName'] = self.last_name
        if self.display_name != NO_NAME_AVAILABLE:
            raw['displayName'] = self.display_name
        if self.provider_id is not None:
            raw['clerkId'] = self.provider_id
        if self.role is not None:
            raw['role'] = self.role
        return raw
