"""Tests for push_client.client — mock-based, no real network calls."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from push_client.client import PushClient
from push_client.exceptions import PushAPIError, PushClientError, PushRateLimitError

URL = "https://example.invalid/functions/v1/send-push"


def _response(status: int, json_body: dict | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = status < 400
    resp.text = "" if json_body is None else str(json_body)
    if json_body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = json_body
    return resp


@pytest.fixture
def mock_session():
    return MagicMock()


@pytest.fixture
def client(mock_session):
    return PushClient(URL, timeout=5.0, session=mock_session)


@pytest.fixture(autouse=True)
def no_sleep():
    with patch("push_client.client.time.sleep") as sleep:
        yield sleep


class TestConstruction:
    def test_requires_url(self):
        with pytest.raises(PushClientError, match="not configured"):
            PushClient("")


class TestSend:
    def test_posts_payload(self, client, mock_session):
        mock_session.post.return_value = _response(200, {"sent": 1})
        assert client.send("Gym Day: Session A", "Strength + Power: Deadlift 100kg") == {"sent": 1}
        mock_session.post.assert_called_once_with(
            URL,
            json={
                "title": "Gym Day: Session A",
                "body": "Strength + Power: Deadlift 100kg",
                "badge": 1,
            },
            timeout=5.0,
        )

    def test_non_json_reply(self, client, mock_session):
        mock_session.post.return_value = _response(204)
        assert client.send("t", "b") == {"status": 204, "text": ""}

    def test_client_error_not_retried(self, client, mock_session, no_sleep):
        mock_session.post.return_value = _response(401, {"error": "unauthorized"})
        with pytest.raises(PushAPIError) as excinfo:
            client.send("t", "b")
        assert excinfo.value.status_code == 401
        assert mock_session.post.call_count == 1
        no_sleep.assert_not_called()


class TestRetry:
    def test_recovers_after_server_error(self, client, mock_session, no_sleep):
        mock_session.post.side_effect = [_response(503), _response(200, {"sent": 1})]
        assert client.send("t", "b") == {"sent": 1}
        no_sleep.assert_called_once_with(2)

    def test_connection_errors_then_success(self, client, mock_session, no_sleep):
        mock_session.post.side_effect = [
            requests.ConnectionError("reset"),
            requests.Timeout("slow"),
            _response(200, {"sent": 1}),
        ]
        assert client.send("t", "b") == {"sent": 1}
        assert [c.args[0] for c in no_sleep.call_args_list] == [2, 4]

    def test_rate_limited_every_time(self, client, mock_session, no_sleep):
        mock_session.post.return_value = _response(429)
        with pytest.raises(PushRateLimitError):
            client.send("t", "b")
        assert mock_session.post.call_count == 3
        # No wait after the final attempt
        assert no_sleep.call_count == 2

    def test_server_errors_exhaust_retries(self, client, mock_session):
        mock_session.post.return_value = _response(500)
        with pytest.raises(PushAPIError, match="HTTP 500") as excinfo:
            client.send("t", "b")
        assert not isinstance(excinfo.value, PushRateLimitError)
