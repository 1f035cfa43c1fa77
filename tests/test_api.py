"""
Tests for the HTTP API.
"""

from unittest.mock import patch

from moment_preview.config import config
from moment_preview.core.validator import (
    CONTEXT_REQUIRED,
    FRAMES_TOO_MANY,
    QUESTION_REQUIRED,
    SECOND_OFFSET_INVALID,
)


def test_root_info(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == config.APP_NAME
    assert response.json()["version"] == config.APP_VERSION


def test_echo_returns_body(client):
    payload = {"hello": "world", "nested": [1, 2, {"a": None}]}
    response = client.post("/", json=payload)

    assert response.status_code == 200
    assert response.json() == {"ok": True, "youSent": payload}


def test_echo_logs_payload(client):
    with patch("moment_preview.api.routes.logging") as mock_logging:
        client.post("/", json={"hello": "world"})

    mock_logging.info.assert_called_once()
    assert "hello" in mock_logging.info.call_args[0][0]


def test_analyze_minimal_payload(client):
    response = client.post("/analyze", json={"question": "Why?", "transcriptLast30": "blah"})
    body = response.json()

    assert response.status_code == 200
    assert body["ok"] is True
    assert body["summary"]["frames"]["count"] == 0
    assert body["normalized"]["question"] == "Why?"
    assert set(body["meta"]) == {"durationMs", "receivedAt"}
    assert body["meta"]["receivedAt"].endswith("Z")


def test_analyze_empty_question(client):
    response = client.post("/analyze", json={"question": ""})
    body = response.json()

    assert response.status_code == 400
    assert body["ok"] is False
    assert any("question" in error for error in body["errors"])
    assert set(body) == {"ok", "errors"}


def test_analyze_offset_out_of_range(client):
    payload = {
        "question": "Why?",
        "frames": [{"secondOffset": 6, "imageBase64": "data:image/png;base64,abc"}],
    }
    response = client.post("/analyze", json=payload)

    assert response.status_code == 400
    assert response.json()["errors"] == [SECOND_OFFSET_INVALID]


def test_analyze_too_many_frames(client, frame):
    payload = {"question": "Why?", "frames": [frame(offset) for offset in range(-5, 6)] * 2}
    response = client.post("/analyze", json=payload)

    assert response.status_code == 400
    assert FRAMES_TOO_MANY in response.json()["errors"]


def test_analyze_requires_context(client):
    response = client.post("/analyze", json={"question": "Why?", "videoTitle": "Title"})

    assert response.status_code == 400
    assert response.json() == {"ok": False, "errors": [CONTEXT_REQUIRED]}


def test_analyze_empty_body(client):
    response = client.post("/analyze")

    assert response.status_code == 400
    assert response.json()["errors"] == [QUESTION_REQUIRED, CONTEXT_REQUIRED]


def test_analyze_full_payload(client, valid_payload):
    response = client.post("/analyze", json=valid_payload)
    body = response.json()

    assert response.status_code == 200
    assert body["normalized"]["question"] == "What is the speaker pointing at?"
    assert [f["secondOffset"] for f in body["normalized"]["frames"]] == [-1, 0, 2]
    assert body["summary"]["frames"]["offsets"] == [-1, 0, 2]
    assert body["summary"]["frames"]["mimes"] == ["image/png", "image/jpeg"]
    assert body["summary"]["video"]["hasTitle"] is True
    assert "imageBase64" not in response.text
    assert "base64," not in response.text


def test_analyze_is_idempotent(client, valid_payload):
    first = client.post("/analyze", json=valid_payload).json()
    second = client.post("/analyze", json=valid_payload).json()

    assert first["summary"] == second["summary"]
    assert first["normalized"] == second["normalized"]


def test_analyze_malformed_json(client):
    response = client.post(
        "/analyze", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 500
    assert "detail" in response.json()


def test_cors_allows_any_origin(client):
    response = client.post(
        "/analyze",
        json={"question": "Why?", "transcriptLast30": "blah"},
        headers={"Origin": "https://example.com"},
    )

    assert response.headers["access-control-allow-origin"] in ("*", "https://example.com")


def test_process_time_header(client):
    response = client.get("/")

    assert "x-process-time" in response.headers
