import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from luct.main import app
from tests.helpers import ApiTestCase


class TestSystem(ApiTestCase):
    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "OK")
        self.assertEqual(body["service"], "LUCT Reporting System API")
        self.assertIn("timestamp", body)

    def test_root_banner(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("LUCT Reporting System Backend is running", response.text)

    def test_malformed_body_is_a_400(self):
        response = self.client.post("/courses", json={"course_code": ["not", "a", "string"]})
        self.assertEqual(response.status_code, 400)
        self.assertIn("course_code", response.json()["error"])


class TestStartup(unittest.TestCase):
    @patch("luct.main.init_db")
    @patch("luct.main.engine")
    def test_unreachable_database_does_not_stop_startup(self, mock_engine, mock_init_db):
        down = OperationalError("SELECT 1", {}, Exception("connection refused"))
        mock_engine.connect.side_effect = down
        mock_init_db.side_effect = down

        with TestClient(app) as client:
            response = client.get("/health")
        self.assertEqual(response.status_code, 200)
        mock_engine.connect.assert_called_once()
        mock_init_db.assert_called_once()
