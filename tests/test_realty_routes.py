"""
Tests for the /api/realty proxy routes.

The webhook is replaced by a mocked requests session injected through the
FastAPI dependency overrides.
"""

from urllib.parse import parse_qs, urlparse

import pytest
import requests
from fastapi.testclient import TestClient

from realty_agent.dependencies import get_http_session, get_webhook_client
from realty_agent.main import app
from realty_agent.services.webhook_client import RealtyWebhookClient

BASE_URL = "https://hooks.example.com/webhook/realty-agent"


@pytest.fixture
def api(http_session, sleeps):
    app.dependency_overrides[get_http_session] = lambda: http_session
    app.dependency_overrides[get_webhook_client] = lambda: RealtyWebhookClient(
        url=BASE_URL, session=http_session, sleep=sleeps.append
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def forwarded_query(http_session):
    return parse_qs(urlparse(http_session.get.call_args[0][0]).query)


def test_missing_message_returns_400(api, http_session):
    response = api.get("/api/realty")

    assert response.status_code == 400
    assert "Missing required message parameter" in response.json()["error"]
    http_session.get.assert_not_called()


def test_empty_message_returns_400(api):
    response = api.get("/api/realty", params={"message": ""})
    assert response.status_code == 400


def test_forwards_message_as_contact_message(api, http_session, response_factory):
    http_session.get.return_value = response_factory(200, {"output": "3 listings"})

    response = api.get("/api/realty", params={"message": "flats in Noida", "sessionId": "s-1"})

    assert response.status_code == 200
    assert response.json() == {"output": "3 listings"}
    assert forwarded_query(http_session) == {
        "contactMessage": ["flats in Noida"],
        "sessionId": ["s-1"],
    }


def test_contact_message_takes_precedence(api, http_session, response_factory):
    http_session.get.return_value = response_factory(200, {"result": "x"})

    api.get("/api/realty", params={"message": "ignored", "contactMessage": "used"})

    assert forwarded_query(http_session) == {"contactMessage": ["used"]}


def test_proxy_does_not_retry(api, http_session, response_factory, sleeps):
    http_session.get.return_value = response_factory(503, text="unavailable")

    response = api.get("/api/realty", params={"contactMessage": "hi"})

    assert response.status_code == 502
    assert response.json() == {"error": "Error from webhook (503)", "details": "unavailable"}
    assert http_session.get.call_count == 1
    assert sleeps == []


def test_timeout_returns_504(api, http_session):
    http_session.get.side_effect = requests.Timeout("read timed out")

    response = api.get("/api/realty", params={"contactMessage": "hi"})

    assert response.status_code == 504
    assert response.json()["error"] == "Webhook request timed out"
    assert "details" in response.json()


def test_network_error_returns_500(api, http_session):
    http_session.get.side_effect = requests.ConnectionError("connection refused")

    response = api.get("/api/realty", params={"contactMessage": "hi"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Error during fetch to webhook",
        "details": "connection refused",
    }


def test_unexpected_error_returns_500(api, http_session, response_factory):
    upstream = response_factory(200, {"output": "x"})
    upstream.json.side_effect = RuntimeError("kaboom")
    http_session.get.return_value = upstream

    response = api.get("/api/realty", params={"contactMessage": "hi"})

    assert response.status_code == 500
    assert response.json() == {"error": "Error processing webhook request", "details": "kaboom"}


def test_non_json_body_is_wrapped(api, http_session, response_factory):
    http_session.get.return_value = response_factory(200, text="Thanks for your query")

    response = api.get("/api/realty", params={"contactMessage": "hi"})

    assert response.status_code == 200
    assert response.json() == {"text": "Thanks for your query"}


def test_post_forwards_json_body(api, http_session, response_factory):
    http_session.post.return_value = response_factory(200, {"output": "ok"})

    response = api.post("/api/realty", json={"query": "villas", "budget": 1.5})

    assert response.status_code == 200
    assert response.json() == {"output": "ok"}
    assert http_session.post.call_args[1]["json"] == {"query": "villas", "budget": 1.5}


def test_post_relays_upstream_status(api, http_session, response_factory):
    http_session.post.return_value = response_factory(404, text="not found")

    response = api.post("/api/realty", json={"query": "villas"})

    assert response.status_code == 404
    assert response.json() == {"error": "Webhook responded with status: 404"}


def test_post_with_invalid_body_returns_500(api, http_session):
    response = api.post(
        "/api/realty", content=b"not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 500
    assert response.json()["error"].startswith("Error forwarding request")
    http_session.post.assert_not_called()


def test_redirect_from_webhook_returns_502(api, http_session, response_factory):
    http_session.get.return_value = response_factory(302, {"moved": True}, reason="Found")

    response = api.get("/api/realty", params={"contactMessage": "hi"})

    assert response.status_code == 502
    assert response.json()["error"] == "Error from webhook (302)"
