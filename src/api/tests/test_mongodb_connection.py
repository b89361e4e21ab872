"""Tests for the cached MongoDB client."""

import unittest
from unittest.mock import patch, MagicMock

from pymongo.errors import ConnectionFailure, PyMongoError

from adapter.mongodb import connection


class TestGetMongodbClient(unittest.TestCase):

    def setUp(self):
        connection.reset_client()

    def tearDown(self):
        connection.reset_client()

    @patch('adapter.mongodb.connection.MONGO_URL', None)
    def test_unconfigured_returns_none(self):
        self.assertIsNone(connection.get_mongodb_client())

    @patch('adapter.mongodb.connection.MONGO_URL', 'mongodb://localhost:27017')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_client_is_cached(self, mock_client_class):
        client = MagicMock()
        mock_client_class.return_value = client

        self.assertIs(connection.get_mongodb_client(), client)
        self.assertIs(connection.get_mongodb_client(), client)

        mock_client_class.assert_called_once()

    @patch('adapter.mongodb.connection.MONGO_URL', 'mongodb://localhost:27017')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_initial_failure_is_not_retried(self, mock_client_class):
        mock_client_class.return_value.admin.command.side_effect = ConnectionFailure("refused")

        self.assertIsNone(connection.get_mongodb_client())
        self.assertIsNone(connection.get_mongodb_client())

        mock_client_class.assert_called_once()

    @patch('adapter.mongodb.connection.MONGO_URL', 'mongodb://localhost:27017')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_reconnects_after_cached_client_fails(self, mock_client_class):
        stale, fresh = MagicMock(), MagicMock()
        mock_client_class.side_effect = [stale, fresh]
        connection.get_mongodb_client()

        stale.admin.command.side_effect = PyMongoError("gone")

        self.assertIs(connection.get_mongodb_client(), fresh)


if __name__ == '__main__':
    unittest.main()
