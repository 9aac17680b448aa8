# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from digestlog.api import create_app
from digestlog.logs.storage import LogStore, StorageError

SAMPLE = {
    "timestamp": "2024-01-01T10:00:00Z",
    "bristol_score": 4,
    "color": "Brown",
    "quantity": "Medium",
    "urgency": "Normal",
    "pain_level": 0,
    "notes": "",
    "has_blood": False,
    "has_mucus": False,
    "is_floating": False,
    "smell": "Normal",
}


class _BrokenStore(LogStore):
    def add(self, entry):
        raise StorageError("disk I/O error")

    def list(self):
        raise StorageError("disk I/O error")

    def remove(self, log_id, *, missing_ok=True):
        raise StorageError("disk I/O error")


class TestLogsApi(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="digestlog-test-"))
        self.store = LogStore(self._tmp / "logs.db")
        self.client = TestClient(create_app(self.store))

    def tearDown(self) -> None:
        self.client.close()
        self.store.close()
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_health(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_create_then_list_then_delete(self) -> None:
        resp = self.client.post("/api/logs", json=SAMPLE)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True, "id": 1})

        resp = self.client.get("/api/logs")
        self.assertEqual(resp.status_code, 200)
        logs = resp.json()
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0]["id"], 1)
        self.assertIs(logs[0]["has_blood"], False)
        self.assertEqual({k: logs[0][k] for k in SAMPLE}, SAMPLE)

        resp = self.client.delete("/api/logs/1")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})

        resp = self.client.get("/api/logs")
        self.assertEqual(resp.json(), [])

    def test_list_is_newest_first(self) -> None:
        for stamp in ("2024-01-01T08:00:00Z", "2024-01-03T08:00:00Z", "2024-01-02T08:00:00Z"):
            self.client.post("/api/logs", json={**SAMPLE, "timestamp": stamp})

        stamps = [log["timestamp"] for log in self.client.get("/api/logs").json()]
        self.assertEqual(stamps, ["2024-01-03T08:00:00Z", "2024-01-02T08:00:00Z", "2024-01-01T08:00:00Z"])

    def test_delete_missing_id_succeeds(self) -> None:
        resp = self.client.delete("/api/logs/999")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})

    def test_delete_requires_integer_id(self) -> None:
        resp = self.client.delete("/api/logs/abc")
        self.assertEqual(resp.status_code, 422)

    def test_out_of_range_values_are_rejected(self) -> None:
        for field, value in (("bristol_score", 0), ("bristol_score", 8), ("pain_level", -1), ("pain_level", 11)):
            with self.subTest(field=field, value=value):
                resp = self.client.post("/api/logs", json={**SAMPLE, field: value})
                self.assertEqual(resp.status_code, 422)
        self.assertEqual(self.client.get("/api/logs").json(), [])

    def test_bad_timestamp_and_missing_fields_are_rejected(self) -> None:
        resp = self.client.post("/api/logs", json={**SAMPLE, "timestamp": "yesterday"})
        self.assertEqual(resp.status_code, 422)

        body = dict(SAMPLE)
        del body["color"]
        resp = self.client.post("/api/logs", json=body)
        self.assertEqual(resp.status_code, 422)

    def test_timestamp_variants_are_accepted(self) -> None:
        for stamp in ("2024-01-01T10:00:00z", "2024-01-01T10:00:00.1Z", "2024-01-01T10:00:00+02:00", "2024-01-01T10:00:00"):
            with self.subTest(timestamp=stamp):
                resp = self.client.post("/api/logs", json={**SAMPLE, "timestamp": stamp})
                self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(self.client.get("/api/logs").json()), 4)

    def test_optional_fields_default(self) -> None:
        resp = self.client.post(
            "/api/logs",
            json={"timestamp": "2024-01-01T10:00:00Z", "bristol_score": 3, "color": "Green"},
        )
        self.assertEqual(resp.status_code, 200)
        [log] = self.client.get("/api/logs").json()
        self.assertEqual(log["pain_level"], 0)
        self.assertEqual(log["notes"], "")
        self.assertIs(log["is_floating"], False)


class TestLogsApiStorageFailures(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="digestlog-test-"))
        self.store = _BrokenStore(self._tmp / "logs.db")
        self.client = TestClient(create_app(self.store))

    def tearDown(self) -> None:
        self.client.close()
        self.store.close()
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_list_failure(self) -> None:
        with self.assertLogs("digestlog.logs.api", level="ERROR"):
            resp = self.client.get("/api/logs")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Failed to fetch logs"})

    def test_add_failure(self) -> None:
        with self.assertLogs("digestlog.logs.api", level="ERROR"):
            resp = self.client.post("/api/logs", json=SAMPLE)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Failed to add log"})

    def test_delete_failure_hides_detail(self) -> None:
        with self.assertLogs("digestlog.logs.api", level="ERROR") as captured:
            resp = self.client.delete("/api/logs/1")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Failed to delete log"})
        self.assertNotIn("disk", resp.text)
        self.assertIn("disk I/O error", str(captured.records[0].exc_info[1]))


if __name__ == "__main__":
    unittest.main()
