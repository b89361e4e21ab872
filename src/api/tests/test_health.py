"""Tests for the health check endpoint."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from api.main import app
from api.dependencies import get_cache
from adapter.fake.cache import FakeCache


class TestHealth(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.cache = FakeCache()
        app.dependency_overrides[get_cache] = lambda: self.cache

    def tearDown(self):
        app.dependency_overrides.clear()

    @patch('api.routes.health.get_mongodb_client')
    def test_all_healthy(self, mock_get_client):
        mock_get_client.return_value = MagicMock()

        response = self.client.get('/health')

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['status'], 'healthy')
        self.assertEqual(body['services']['redis']['status'], 'healthy')
        self.assertEqual(body['services']['mongodb']['status'], 'healthy')

    @patch('api.routes.health.get_mongodb_client')
    def test_redis_down_is_degraded(self, mock_get_client):
        mock_get_client.return_value = MagicMock()
        self.cache.available = False

        response = self.client.get('/health')

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()['status'], 'degraded')

    @patch('api.routes.health.get_mongodb_client')
    def test_mongodb_unconfigured(self, mock_get_client):
        mock_get_client.return_value = None

        response = self.client.get('/health')

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()['services']['mongodb']['status'], 'unhealthy')

    @patch('api.routes.health.get_mongodb_client')
    def test_mongodb_ping_error(self, mock_get_client):
        client = MagicMock()
        client.admin.command.side_effect = PyMongoError("timed out")
        mock_get_client.return_value = client

        response = self.client.get('/health')

        self.assertEqual(response.status_code, 503)
        self.assertIn('timed out', response.json()['services']['mongodb']['message'])


if __name__ == '__main__':
    unittest.main()
