"""Tests for the cached MongoDB client."""

import unittest
from unittest.mock import MagicMock, patch

from pymongo.errors import ServerSelectionTimeoutError

from adapter.mongodb import connection
from adapter.mongodb.connection import RETRY_INTERVAL_SECONDS, get_mongodb_client, reset_client


def _unreachable_client() -> MagicMock:
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("db:27017 timed out")
    return client


@patch('adapter.mongodb.connection.time')
@patch('adapter.mongodb.connection.MongoClient')
class TestGetMongodbClient(unittest.TestCase):

    def setUp(self):
        reset_client()

    def tearDown(self):
        reset_client()

    def test_connects_once_and_reuses_client(self, mock_client_cls, mock_time):
        mock_time.monotonic.return_value = 100.0
        client = MagicMock()
        mock_client_cls.return_value = client

        self.assertIs(get_mongodb_client("mongodb://db:27017"), client)
        self.assertIs(get_mongodb_client("mongodb://db:27017"), client)

        mock_client_cls.assert_called_once()
        # only the connect-time ping, none on reuse
        client.admin.command.assert_called_once_with('ping')

    def test_recovers_after_initial_outage(self, mock_client_cls, mock_time):
        good = MagicMock()
        mock_client_cls.side_effect = [_unreachable_client(), good]

        mock_time.monotonic.return_value = 100.0
        self.assertIsNone(get_mongodb_client("mongodb://db:27017"))

        mock_time.monotonic.return_value = 100.0 + RETRY_INTERVAL_SECONDS
        self.assertIs(get_mongodb_client("mongodb://db:27017"), good)
        self.assertIs(get_mongodb_client("mongodb://db:27017"), good)
        self.assertEqual(mock_client_cls.call_count, 2)

    def test_waits_between_attempts(self, mock_client_cls, mock_time):
        mock_client_cls.side_effect = [_unreachable_client(), MagicMock()]

        mock_time.monotonic.return_value = 100.0
        self.assertIsNone(get_mongodb_client("mongodb://db:27017"))

        mock_time.monotonic.return_value = 100.5
        self.assertIsNone(get_mongodb_client("mongodb://db:27017"))
        self.assertEqual(mock_client_cls.call_count, 1)

    def test_missing_url_never_connects(self, mock_client_cls, mock_time):
        mock_time.monotonic.return_value = 100.0

        self.assertIsNone(get_mongodb_client(None))
        self.assertIsNone(get_mongodb_client(""))

        mock_client_cls.assert_not_called()

    def test_outage_is_logged_once(self, mock_client_cls, mock_time):
        mock_client_cls.side_effect = [_unreachable_client(), _unreachable_client()]

        with self.assertLogs(connection.logger, level="ERROR") as logs:
            mock_time.monotonic.return_value = 100.0
            get_mongodb_client("mongodb://db:27017")
            mock_time.monotonic.return_value = 200.0
            get_mongodb_client("mongodb://db:27017")

        self.assertEqual(len(logs.records), 1)
        self.assertEqual(mock_client_cls.call_count, 2)


if __name__ == '__main__':
    unittest.main()
