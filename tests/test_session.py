"""Tests for Realtime ephemeral key creation."""

import pytest
import requests
from fastapi.testclient import TestClient

from realty_agent.config.constants import DEFAULT_REALTIME_MODEL, OPENAI_REALTIME_SESSIONS_URL
from realty_agent.dependencies import get_http_session
from realty_agent.exceptions import MissingAPIKeyError, SessionCreationError
from realty_agent.main import app
from realty_agent.services.realtime_session import create_realtime_session

SESSION_PAYLOAD = {
    "id": "sess_001",
    "model": DEFAULT_REALTIME_MODEL,
    "client_secret": {"value": "ek_abc123", "expires_at": 1700000000},
}


@pytest.fixture
def api(http_session, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    app.dependency_overrides[get_http_session] = lambda: http_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_session_route_returns_payload(api, http_session, response_factory):
    http_session.post.return_value = response_factory(200, SESSION_PAYLOAD)

    response = api.get("/api/session")

    assert response.status_code == 200
    assert response.json()["client_secret"]["value"] == "ek_abc123"
    url = http_session.post.call_args[0][0]
    kwargs = http_session.post.call_args[1]
    assert url == OPENAI_REALTIME_SESSIONS_URL
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["json"] == {"model": DEFAULT_REALTIME_MODEL, "voice": "coral"}


def test_missing_key_returns_500(api, http_session, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY")

    response = api.get("/api/session")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to create Realtime session",
        "details": "OPENAI_API_KEY environment variable not set",
    }
    http_session.post.assert_not_called()


def test_upstream_rejection_returns_502(api, http_session, response_factory):
    http_session.post.return_value = response_factory(401, text="invalid key")

    response = api.get("/api/session")

    assert response.status_code == 502
    assert response.json()["details"] == "OpenAI responded with status 401"


def test_missing_client_secret_is_rejected(http_session, response_factory):
    http_session.post.return_value = response_factory(200, {"id": "sess_002"})

    with pytest.raises(SessionCreationError, match="Unexpected Realtime session payload"):
        create_realtime_session(api_key="sk-test", session=http_session)


def test_network_error(http_session):
    http_session.post.side_effect = requests.ConnectionError("unreachable")

    with pytest.raises(SessionCreationError) as exc_info:
        create_realtime_session(api_key="sk-test", session=http_session)

    assert not isinstance(exc_info.value, MissingAPIKeyError)
    assert "unreachable" in str(exc_info.value)
