"""User record normalization.

The backend has shipped several user shapes (camelCase, snake_case, Mongo
``_id``, identity-provider ids, string admin flags). Every raw record is
reshaped here into one UserRecord; the candidate lists below are tried in
order and the first usable value wins.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from domain.model.user import NO_NAME_AVAILABLE, UserRecord

logger = logging.getLogger(__name__)

ID_FIELDS = ('id', '_id', 'userId', 'clerkId')
NAME_PAIR_FIELDS = (('firstName', 'lastName'), ('first_name', 'last_name'))
SINGLE_NAME_FIELDS = ('name', 'displayName', 'username')
PROVIDER_ID_FIELDS = ('clerkId', 'userId')
CREATED_AT_FIELDS = ('createdAt', 'created_at')


def _first_present(raw: Mapping[str, Any], fields: Iterable[str]) -> Any:
    for field in fields:
        value = raw.get(field)
        if value is not None and value != '':
            return value
    return None


def _as_text(value: Any) -> str | None:
    return None if value is None else str(value)


def _name_pair(raw: Mapping[str, Any]) -> tuple[Any, Any]:
    """First complete first/last name pair, or (None, None)."""
    for first_field, last_field in NAME_PAIR_FIELDS:
        first, last = raw.get(first_field), raw.get(last_field)
        if first and last:
            return first, last
    return None, None


def _resolve_display_name(raw: Mapping[str, Any]) -> str:
    first, last = _name_pair(raw)
    if first and last:
        return f"{first} {last}"
    name = _first_present(raw, SINGLE_NAME_FIELDS)
    return str(name) if name else NO_NAME_AVAILABLE


def _resolve_admin_flag(raw: Mapping[str, Any]) -> bool:
    flag = raw.get('isAdmin')
    if flag is True:
        return True
    if isinstance(flag, str) and flag.lower() == 'true':
        return True
    role = raw.get('role')
    return isinstance(role, str) and role.lower() == 'admin'


def normalize_user(raw: Mapping[str, Any] | UserRecord) -> UserRecord | None:
    """Reshape one raw user object into a UserRecord.

    Never raises. Missing optional fields fall back to defaults; a record with
    no usable identifier is the one case that cannot be recovered and yields
    None.
    """
    if isinstance(raw, UserRecord):
        return raw
    if not isinstance(raw, Mapping):
        logger.warning("Skipping user record that is not an object", extra={"type": type(raw).__name__})
        return None

    user_id = _first_present(raw, ID_FIELDS)
    if user_id is None:
        logger.warning("Skipping user record without identifier", extra={"fields": sorted(raw.keys())})
        return None

    # only a complete pair fills first and last name
    first_name, last_name = _name_pair(raw)

    return UserRecord(
        id=str(user_id),
        email=str(raw.get('email') or ''),
        display_name=_resolve_display_name(raw),
        first_name=_as_text(first_name),
        last_name=_as_text(last_name),
        created_at=_as_text(_first_present(raw, CREATED_AT_FIELDS)),
        is_admin=_resolve_admin_flag(raw),
        provider_id=_as_text(_first_present(raw, PROVIDER_ID_FIELDS)),
        role=_as_text(raw.get('role')),
    )


def normalize_users(raws: Iterable[Mapping[str, Any] | UserRecord]) -> list[UserRecord]:
    """Normalize a user list, dropping records without an identifier."""
    users = []
    for raw in raws:
        user = normalize_user(raw)
        if user is not None:
            users.append(user)
    return users
