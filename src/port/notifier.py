from typing import Protocol


class Notifier(Protocol):
    """Surfaces transient messages (toasts) to the operator."""

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...
