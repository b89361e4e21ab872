from typing import Protocol


class TokenProvider(Protocol):
    """Supplies the signed-in operator's bearer credential."""

    @property
    def operator_id(self) -> str | None:
        """Identity provider id of the signed-in operator, None when signed out."""
        ...

    async def get_token(self) -> str | None: ...
