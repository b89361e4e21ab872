"""Tests for the admin dashboard HTML routes."""

import unittest

from fastapi.testclient import TestClient

from api.main import app
from api.dependencies import get_backend_api
from api.security import get_token_provider
from adapter.fake.backend_api import FakeBackendApi
from adapter.identity.request_token_provider import RequestTokenProvider
from domain.model.errors import HttpError

ADMIN_ID = 'user_admin'


def _users(count: int = 0) -> list[dict]:
    users = [{'id': 'u-admin', 'clerkId': ADMIN_ID, 'firstName': 'Ada', 'lastName': 'Admin',
              'email': 'ada@example.com', 'role': 'admin'}]
    users += [{'id': f'u{i}', 'firstName': 'Member', 'lastName': str(i), 'email': f'member{i}@example.com',
               'createdAt': '2025-05-13T20:11:41Z'} for i in range(count)]
    return users


class DashboardRouteTestCase(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.api = FakeBackendApi(users=_users(2), post_count=1234, public_post_count=56)
        app.dependency_overrides[get_backend_api] = lambda: self.api
        self.sign_in(ADMIN_ID)

    def tearDown(self):
        app.dependency_overrides.clear()

    def sign_in(self, operator_id: str | None, token: str | None = 'token'):
        app.dependency_overrides[get_token_provider] = (
            lambda: RequestTokenProvider(token=token, operator_id=operator_id)
        )


class TestDashboardPage(DashboardRouteTestCase):
    """GET /dashboard"""

    def test_signed_out_redirects_to_sign_in(self):
        self.sign_in(None)

        response = self.client.get('/dashboard', follow_redirects=False)

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers['location'], '/sign-in')
        self.assertEqual(self.api.calls, [])

    def test_admin_sees_stats_and_users(self):
        response = self.client.get('/dashboard')

        self.assertEqual(response.status_code, 200)
        self.assertIn('data-stat="Total Users">3<', response.text)
        self.assertIn('data-stat="Total Posts">1,234<', response.text)
        self.assertIn('data-stat="Public Posts">56<', response.text)
        self.assertIn('data-user-id="u-admin"', response.text)
        self.assertIn('data-user-id="u0"', response.text)
        self.assertIn('May 13, 2025', response.text)

    def test_non_admin_is_denied(self):
        self.sign_in('user_member')

        response = self.client.get('/dashboard')

        self.assertEqual(response.status_code, 403)
        self.assertIn('Access denied. Admin privileges required.', response.text)
        self.assertNotIn('data-user-id', response.text)

    def test_failed_load_is_denied_with_error_toast(self):
        self.api.failures['fetch_post_count'] = HttpError(500, 'Database down')

        response = self.client.get('/dashboard')

        self.assertEqual(response.status_code, 502)
        self.assertIn('Access denied. Admin privileges required.', response.text)
        self.assertIn('data-level="error"', response.text)
        self.assertIn('Database down', response.text)

    def test_search_filters_rows(self):
        response = self.client.get('/dashboard', params={'q': 'MEMBER 1'})

        self.assertIn('data-user-id="u1"', response.text)
        self.assertNotIn('data-user-id="u0"', response.text)
        self.assertNotIn('data-user-id="u-admin"', response.text)

    def test_search_without_matches(self):
        response = self.client.get('/dashboard', params={'q': 'nobody'})

        self.assertEqual(response.status_code, 200)
        self.assertIn('No users found', response.text)

    def test_pagination(self):
        self.api.users = _users(24)

        response = self.client.get('/dashboard', params={'page': 3})

        self.assertIn('Showing 21-25 of 25 users', response.text)
        self.assertIn('Page 3 of 3', response.text)

    def test_page_beyond_last_is_clamped(self):
        response = self.client.get('/dashboard', params={'page': 9})

        self.assertEqual(response.status_code, 200)
        self.assertIn('Page 1 of 1', response.text)

    def test_notice_from_redirect_is_shown(self):
        response = self.client.get('/dashboard', params={'notice': 'User deleted successfully', 'level': 'success'})

        self.assertIn('data-level="success"', response.text)
        self.assertIn('User deleted successfully', response.text)

    def test_user_content_is_escaped(self):
        self.api.users.append({'id': 'u-x', 'name': '<script>alert(1)</script>', 'email': 'x@example.com'})

        response = self.client.get('/dashboard')

        self.assertNotIn('<script>alert(1)</script>', response.text)
        self.assertIn('&lt;script&gt;', response.text)


class TestDeleteUserRoute(DashboardRouteTestCase):
    """POST /dashboard/users/{user_id}/delete"""

    def test_delete_form_encodes_user_id(self):
        self.api.users.append({'id': 'auth0|a/b?c#d', 'name': 'Odd Id', 'email': 'odd@example.com'})

        page = self.client.get('/dashboard')

        self.assertIn('action="/dashboard/users/auth0%7Ca%2Fb%3Fc%23d/delete?confirm=yes"', page.text)

    def test_encoded_user_id_reaches_backend(self):
        self.api.users.append({'id': 'auth0|a/b?c#d', 'name': 'Odd Id', 'email': 'odd@example.com'})

        response = self.client.post('/dashboard/users/auth0%7Ca%2Fb%3Fc%23d/delete', params={'confirm': 'yes'},
                                    follow_redirects=False)

        self.assertEqual(response.status_code, 303)
        self.assertIn(('delete_user', 'auth0|a/b?c#d'), self.api.calls)

    def test_confirmed_delete_redirects_with_success_notice(self):
        response = self.client.post('/dashboard/users/u0/delete', params={'confirm': 'yes'}, follow_redirects=False)

        self.assertEqual(response.status_code, 303)
        self.assertIn('notice=User+deleted+successfully', response.headers['location'])
        self.assertIn('level=success', response.headers['location'])
        self.assertIn(('delete_user', 'u0'), self.api.calls)
        self.assertNotIn('u0', [u.get('id') for u in self.api.users])

    def test_unconfirmed_delete_issues_no_request(self):
        response = self.client.post('/dashboard/users/u0/delete', follow_redirects=False)

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response.headers['location'], '/dashboard')
        self.assertNotIn('delete_user', [op for op, _ in self.api.calls])
        self.assertEqual(len(self.api.users), 3)

    def test_failed_delete_redirects_with_error_notice(self):
        self.api.failures['delete_user'] = HttpError(500, 'Cannot delete user')

        response = self.client.post('/dashboard/users/u0/delete', params={'confirm': 'yes'}, follow_redirects=False)

        self.assertEqual(response.status_code, 303)
        self.assertIn('notice=Cannot+delete+user', response.headers['location'])
        self.assertIn('level=error', response.headers['location'])

    def test_non_admin_cannot_delete(self):
        self.sign_in('user_member')

        response = self.client.post('/dashboard/users/u0/delete', params={'confirm': 'yes'}, follow_redirects=False)

        self.assertEqual(response.status_code, 403)
        self.assertNotIn('delete_user', [op for op, _ in self.api.calls])

    def test_signed_out_delete_redirects_to_sign_in(self):
        self.sign_in(None)

        response = self.client.post('/dashboard/users/u0/delete', params={'confirm': 'yes'}, follow_redirects=False)

        self.assertEqual(response.status_code, 302)
        self.assertEqual(self.api.calls, [])


if __name__ == '__main__':
    unittest.main()
