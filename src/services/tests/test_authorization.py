"""Unit tests for authorization module."""

import unittest

from domain.model.dashboard import AuthorizationState
from domain.model.errors import PermissionDeniedError
from domain.model.user import UserRecord
from services.authorization import ensure_admin, find_operator_record, resolve_authorization


def _user(user_id: str, is_admin: bool = False, provider_id: str | None = None) -> UserRecord:
    return UserRecord(id=user_id, email=f"{user_id}@example.com", is_admin=is_admin, provider_id=provider_id)


class TestResolveAuthorization(unittest.TestCase):

    def setUp(self):
        self.users = [
            _user('u1', is_admin=False, provider_id='user_plain'),
            _user('u2', is_admin=True, provider_id='user_admin'),
            _user('u3', is_admin=True),
        ]

    def test_admin_matched_by_provider_id(self):
        self.assertEqual(resolve_authorization(self.users, 'user_admin'), AuthorizationState.ADMIN)

    def test_admin_matched_by_internal_id(self):
        self.assertEqual(resolve_authorization(self.users, 'u3'), AuthorizationState.ADMIN)

    def test_non_admin_record(self):
        self.assertEqual(resolve_authorization(self.users, 'user_plain'), AuthorizationState.NOT_ADMIN)

    def test_no_matching_record_is_not_admin(self):
        self.assertEqual(resolve_authorization(self.users, 'user_unknown'), AuthorizationState.NOT_ADMIN)

    def test_missing_operator_is_not_admin(self):
        self.assertEqual(resolve_authorization(self.users, None), AuthorizationState.NOT_ADMIN)
        self.assertEqual(resolve_authorization(self.users, ''), AuthorizationState.NOT_ADMIN)

    def test_empty_list_is_not_admin(self):
        self.assertEqual(resolve_authorization([], 'user_admin'), AuthorizationState.NOT_ADMIN)

    def test_admin_iff_matched_flag_true(self):
        for user in self.users:
            expected = AuthorizationState.ADMIN if user.is_admin else AuthorizationState.NOT_ADMIN
            self.assertEqual(resolve_authorization(self.users, user.id), expected)

    def test_find_operator_record(self):
        self.assertEqual(find_operator_record(self.users, 'user_plain').id, 'u1')
        self.assertIsNone(find_operator_record(self.users, 'nope'))


class TestEnsureAdmin(unittest.TestCase):

    def test_admin_passes(self):
        ensure_admin(AuthorizationState.ADMIN)

    def test_not_admin_and_unknown_raise(self):
        for state in (AuthorizationState.NOT_ADMIN, AuthorizationState.UNKNOWN):
            with self.assertRaises(PermissionDeniedError):
                ensure_admin(state)


if __name__ == '__main__':
    unittest.main()
