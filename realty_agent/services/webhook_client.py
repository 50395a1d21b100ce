"""
Client for the n8n realty webhook.

This module translates caller messages into outbound requests to the external
workflow-automation webhook and normalizes what comes back. Lookups go through
the retry wrapper; the single-shot ``forward`` and ``post`` calls are used by
the local proxy routes, which map failures to HTTP statuses themselves.

Message sniffing rules:
- A message that parses to a JSON object contributes its first usable
  ``text``, ``query`` or ``message`` value, or the whole object re-serialized.
  Null, empty strings, ``false`` and numeric zero are skipped; arrays and
  objects (even empty ones) are used.
- Anything else (plain text, JSON numbers, strings, arrays, null) is sent
  verbatim, so the literal text ``123`` stays ``"123"``.
"""

import json
import logging
import time
from typing import Any, Callable, Optional
from urllib.parse import quote, urlencode

import requests

from realty_agent.config.constants import (
    CONTACT_MESSAGE_PARAM,
    DEFAULT_INITIAL_BACKOFF_MS,
    DEFAULT_MAX_ATTEMPTS,
    LOGGER_NAME,
    MESSAGE_KEYS,
    OUTPUT_KEY,
    REALTY_WEBHOOK_URL,
    SESSION_ID_PARAM,
    WEBHOOK_TIMEOUT,
)
from realty_agent.exceptions import UpstreamStatusError, WebhookLookupError
from realty_agent.services.retry import is_2xx, with_retry

logger = logging.getLogger(LOGGER_NAME)


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _is_usable(value: Any) -> bool:
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def extract_outbound_message(message: str) -> str:
    """
    Turn a caller message into the string sent to the webhook.

    Args:
        message: Plain text or a JSON-encoded object

    Returns:
        The extracted or re-serialized message, or ``message`` unchanged
    """
    try:
        parsed = json.loads(message)
    except (TypeError, ValueError):
        logger.debug("Message is not JSON, using as plain string")
        return message

    if not isinstance(parsed, dict):
        return message

    for key in MESSAGE_KEYS:
        value = parsed.get(key)
        if not _is_usable(value):
            continue
        logger.debug(f"Using '{key}' property from JSON message")
        return value if isinstance(value, str) else _compact_json(value)

    logger.debug("Using entire JSON object as message")
    return _compact_json(parsed)


def build_lookup_url(
    base_url: str,
    message: str,
    session_id: Optional[str] = None,
    param: str = CONTACT_MESSAGE_PARAM,
) -> str:
    """Append the message (and optional session ID) as query parameters."""
    params = {param: message}
    if session_id:
        params[SESSION_ID_PARAM] = session_id
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{urlencode(params, quote_via=quote)}"


def parse_response_body(response: requests.Response) -> Any:
    """Decode a webhook response, wrapping non-JSON bodies as ``{"text": body}``."""
    try:
        return response.json()
    except ValueError:
        logger.debug("Webhook response is not JSON, wrapping raw text")
        return {"text": response.text}


def normalize_output(data: Any) -> Any:
    """Return the ``output`` field of a webhook payload, or the payload itself."""
    if isinstance(data, dict) and OUTPUT_KEY in data:
        logger.info("Received webhook response with output property")
        return data[OUTPUT_KEY]

    logger.warning(
        'Webhook response missing expected "output" property, returning full response'
    )
    return data


class RealtyWebhookClient:
    """
    Client for the external realty webhook.

    The client holds no per-request state; one instance can serve concurrent
    requests. ``session`` and ``sleep`` are injectable so tests never touch
    the network or wait on real timers.
    """

    def __init__(
        self,
        url: str = REALTY_WEBHOOK_URL,
        session: Optional[requests.Session] = None,
        timeout: float = WEBHOOK_TIMEOUT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        initial_backoff_ms: int = DEFAULT_INITIAL_BACKOFF_MS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.initial_backoff_ms = initial_backoff_ms
        self.sleep = sleep

    def lookup(
        self,
        message: str,
        session_id: Optional[str] = None,
        param: str = CONTACT_MESSAGE_PARAM,
    ) -> Any:
        """
        Send a message to the webhook with retries and return the normalized result.

        Args:
            message: Plain text or a JSON-encoded object
            session_id: Optional conversation identifier forwarded as ``sessionId``
            param: Query parameter carrying the message

        Returns:
            The ``output`` value of the webhook response, or the full response

        Raises:
            WebhookLookupError: If the last attempt failed
        """
        outbound = extract_outbound_message(message)
        request_url = build_lookup_url(self.url, outbound, session_id, param)
        logger.info(f"Sending GET request to webhook: {request_url}")

        try:
            response = with_retry(
                lambda: self.session.get(
                    request_url,
                    headers={"Accept": "application/json"},
                    timeout=self.timeout,
                ),
                max_attempts=self.max_attempts,
                initial_backoff_ms=self.initial_backoff_ms,
                sleep=self.sleep,
            )
            logger.info(f"Webhook response status: {response.status_code}")
            data = parse_response_body(response)
        except UpstreamStatusError as e:
            logger.error(f"Webhook lookup failed: {e}")
            raise WebhookLookupError(str(e), status_code=e.status_code) from e
        except Exception as e:
            logger.error(f"Webhook lookup failed: {e}")
            raise WebhookLookupError(str(e)) from e

        result = normalize_output(data)
        logger.debug(f"Webhook response data: {result}")
        return result

    def forward(self, message: str, session_id: Optional[str] = None) -> requests.Response:
        """Forward a message verbatim as ``contactMessage`` in a single GET."""
        request_url = build_lookup_url(self.url, message, session_id)
        logger.info(f"Forwarding GET request to webhook: {request_url}")
        return self.session.get(
            request_url,
            headers={"Accept": "application/json", "Content-Type": "application/json"},
            timeout=self.timeout,
        )

    def post(self, payload: Any) -> requests.Response:
        """Forward a JSON payload to the webhook in a single POST."""
        logger.info("Forwarding POST request to webhook")
        return self.session.post(self.url, json=payload, timeout=self.timeout)

    def probe(self) -> bool:
        """
        Check webhook connectivity with a test message.

        Returns:
            True if the webhook answered with a 2xx status, False otherwise
        """
        logger.info(f"Testing webhook connectivity to: {self.url}")
        try:
            response = self.session.get(
                build_lookup_url(self.url, "test"),
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Error testing webhook: {e}")
            return False

        if is_2xx(response):
            logger.info("Webhook test successful")
            return True
        logger.error(f"Webhook test failed with status: {response.status_code}")
        return False
