"""Tests for the /api/chat route."""

from urllib.parse import parse_qs, urlparse

import pytest
import requests
from fastapi.testclient import TestClient

from realty_agent.agents.base import AgentConfig
from realty_agent.dependencies import get_agent_sets, get_webhook_client
from realty_agent.main import app
from realty_agent.services.webhook_client import RealtyWebhookClient


@pytest.fixture
def api(http_session, sleeps):
    app.dependency_overrides[get_webhook_client] = lambda: RealtyWebhookClient(
        url="https://hooks.example.com/realty", session=http_session, sleep=sleeps.append
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_missing_message_returns_400(api):
    response = api.post("/api/chat", json={"sessionId": "s-1"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing message in request body"}


def test_default_agent_set_echoes(api, http_session):
    response = api.post("/api/chat", json={"message": "hello there"})

    assert response.status_code == 200
    assert "Hello! How can I assist you today?" in response.json()["response"]
    http_session.get.assert_not_called()


def test_realty_agent_set_calls_webhook(api, http_session, response_factory):
    http_session.get.return_value = response_factory(200, {"output": "Sector 150 has 4 projects"})

    response = api.post(
        "/api/chat",
        json={"message": "projects in sector 150", "sessionId": "s-7", "agentSet": "realtyMobileAgent"},
    )

    assert response.status_code == 200
    assert response.json() == {"response": "Sector 150 has 4 projects"}
    query = parse_qs(urlparse(http_session.get.call_args[0][0]).query)
    assert query == {"contactMessage": ["projects in sector 150"], "sessionId": ["s-7"]}


def test_desktop_realty_agent_does_not_forward_session(api, http_session, response_factory):
    http_session.get.return_value = response_factory(200, {"output": "ok"})

    api.post("/api/chat", json={"message": "hi", "sessionId": "s-7", "agentSet": "realtyAgent"})

    query = parse_qs(urlparse(http_session.get.call_args[0][0]).query)
    assert "sessionId" not in query


def test_lookup_failure_returns_500(api, http_session, sleeps):
    http_session.get.side_effect = requests.ConnectionError("refused")

    response = api.post("/api/chat", json={"message": "hi", "agentSet": "realtyAgent"})

    assert response.status_code == 500
    assert response.json()["error"] == "Error processing webhook request"
    assert "refused" in response.json()["details"]
    assert http_session.get.call_count == 3
    assert sleeps == [0.3, 0.6]


def test_unknown_agent_set_returns_404(api):
    response = api.post("/api/chat", json={"message": "hi", "agentSet": "nope"})
    assert response.status_code == 404


def test_agent_without_webhook_tool_returns_500(api):
    app.dependency_overrides[get_agent_sets] = lambda: {
        "simpleExample": [AgentConfig(name="Mute", public_description="", instructions="")]
    }

    response = api.post("/api/chat", json={"message": "hi"})

    assert response.status_code == 500
    assert response.json() == {"error": "Agent does not support webhook"}
