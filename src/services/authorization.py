"""Admin authorization for the signed-in operator.

Fails closed: anything short of a matching record with the admin flag set
resolves to NOT_ADMIN.
"""

import logging
from collections.abc import Iterable

from domain.model.dashboard import AuthorizationState
from domain.model.errors import PermissionDeniedError
from domain.model.user import UserRecord

logger = logging.getLogger(__name__)


def find_operator_record(users: Iterable[UserRecord], operator_id: str | None) -> UserRecord | None:
    """Return the record belonging to the operator.

    The identity provider's id and the platform's own id differ between
    backend versions, so both are compared.
    """
    if not operator_id:
        return None
    for user in users:
        if operator_id in (user.provider_id, user.id):
            return user
    return None


def resolve_authorization(users: Iterable[UserRecord], operator_id: str | None) -> AuthorizationState:
    record = find_operator_record(users, operator_id)
    if record is None:
        logger.info("Operator not found in user list", extra={"operatorId": operator_id})
        return AuthorizationState.NOT_ADMIN
    return AuthorizationState.ADMIN if record.is_admin else AuthorizationState.NOT_ADMIN


def ensure_admin(state: AuthorizationState) -> None:
    """Raise PermissionDeniedError unless state is ADMIN."""
    if state is not AuthorizationState.ADMIN:
        raise PermissionDeniedError("Access denied. Admin privileges required.")
