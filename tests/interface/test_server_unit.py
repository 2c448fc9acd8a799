import logging
from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient

from cadence.application.config import AppConfig
from cadence.consts import VERSION
from cadence.server import app

client = TestClient(app)

PAYLOAD = {
    "problems": [
        {"id": "H", "title": "Word Ladder", "url": "u1", "difficulty": "hard"},
        {"id": "E", "title": "Two Sum", "url": "u2", "difficulty": "easy", "topicName": "Arrays"},
    ],
    "attempts": [
        {
            "id": "a1",
            "problemId": "H",
            "date": "2026-02-03T12:00:00Z",
            "solvedSolo": True,
            "timeSpent": 40,
        }
    ],
    "now": "2026-03-15T12:00:00Z",
    "timezone": "UTC",
}


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == VERSION


def test_get_version():
    response = client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": VERSION}


def test_post_task_queue():
    response = client.post("/task-queue", json=PAYLOAD)

    assert response.status_code == 200
    data = response.json()
    queue = data["taskQueue"]
    assert [t["problem"]["id"] for t in queue] == ["E", "H"]
    assert queue[0]["priority"] == 1100
    assert queue[0]["reason"] == "Never attempted"
    assert queue[1]["problem"]["topicName"] == "Unknown"
    assert queue[1]["reason"] == "Review overdue by 37 days"
    assert queue[1]["lastAttempt"]["timeSpent"] == 40
    assert data["stats"]["total"] == 2
    assert data["stats"]["overdue"] == 1


def test_post_task_queue_full_ranking():
    response = client.post("/task-queue", json={**PAYLOAD, "activeOnly": False})

    assert response.status_code == 200
    assert response.json()["activeOnly"] is False


def test_post_rejects_bad_difficulty():
    payload = {**PAYLOAD, "problems": [{"id": "x", "title": "X", "difficulty": "brutal"}]}
    response = client.post("/task-queue", json=payload)
    assert response.status_code == 422


def test_post_rejects_negative_time_spent():
    attempt = {**PAYLOAD["attempts"][0], "timeSpent": -5}
    response = client.post("/task-queue", json={**PAYLOAD, "attempts": [attempt]})
    assert response.status_code == 422


def test_post_rejects_unknown_timezone():
    response = client.post("/task-queue", json={**PAYLOAD, "timezone": "Not/AZone"})
    assert response.status_code == 422


@patch("cadence.server.TaskQueueService")
def test_post_internal_error(mock_service_cls):
    mock_service = MagicMock()
    mock_service.get_snapshot = AsyncMock(side_effect=RuntimeError("boom"))
    mock_service_cls.return_value = mock_service

    response = client.post("/task-queue", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate task queue"


@patch("cadence.server.resolve_config")
def test_get_task_queue_from_data_file(mock_resolve_config, tmp_path, mock_home):
    path = tmp_path / "practice.yaml"
    path.write_text("problems:\n  - {id: p1, title: Two Sum, difficulty: easy}\n")
    mock_resolve_config.return_value = AppConfig(data_file=path)

    response = client.get("/task-queue")

    assert response.status_code == 200
    data = response.json()
    assert [t["problem"]["id"] for t in data["taskQueue"]] == ["p1"]
    assert data["stats"]["neverAttempted"] == 1


@patch("cadence.server.resolve_config")
def test_get_task_queue_without_data(mock_resolve_config, mock_home):
    mock_resolve_config.return_value = AppConfig()

    response = client.get("/task-queue")

    assert response.status_code == 404


@patch("cadence.server.resolve_config")
def test_startup_logs_configured_source(mock_resolve_config, caplog, tmp_path, mock_home):
    mock_resolve_config.return_value = AppConfig(data_file=tmp_path / "practice.yaml")
    caplog.set_level(logging.INFO, logger="cadence.server")

    with TestClient(app) as started:
        assert started.get("/health").status_code == 200

    messages = [r.getMessage() for r in caplog.records if r.name == "cadence.server"]
    startup = [m for m in messages if m.startswith(f"Task queue API v{VERSION} up")]
    assert startup and "tz=UTC" in startup[0] and "practice.yaml" in startup[0]
    assert "Task queue API stopped" in messages
