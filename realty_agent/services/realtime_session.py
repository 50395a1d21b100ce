"""
Ephemeral key minting for OpenAI Realtime sessions.

The browser never sees the server's API key: it asks the backend for a
short-lived session, then opens the Realtime connection with the returned
``client_secret.value``.
"""

import logging
import os
from typing import Any, Dict, Optional

import requests

from realty_agent.config.constants import (
    DEFAULT_REALTIME_MODEL,
    DEFAULT_VOICE,
    LOGGER_NAME,
    OPENAI_REALTIME_SESSIONS_URL,
    OPENAI_SESSION_TIMEOUT,
)
from realty_agent.exceptions import MissingAPIKeyError, SessionCreationError
from realty_agent.models.openai_schemas import RealtimeSessionResponse
from realty_agent.services.retry import is_2xx

logger = logging.getLogger(LOGGER_NAME)


def create_realtime_session(
    api_key: Optional[str] = None,
    model: str = DEFAULT_REALTIME_MODEL,
    voice: str = DEFAULT_VOICE,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    Create an OpenAI Realtime session and return its JSON payload.

    Args:
        api_key: OpenAI API key, defaults to the OPENAI_API_KEY env var
        model: Realtime model to open the session with
        voice: Voice used for audio responses
        session: Optional requests session to issue the call with

    Returns:
        The session payload as returned by OpenAI

    Raises:
        SessionCreationError: If no key is configured or OpenAI rejects the call
    """
    api_key = api_key or os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise MissingAPIKeyError("OPENAI_API_KEY environment variable not set")

    http = session or requests
    logger.info(f"Requesting Realtime session for model: {model}")
    try:
        response = http.post(
            OPENAI_REALTIME_SESSIONS_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json={"model": model, "voice": voice},
            timeout=OPENAI_SESSION_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"Error requesting Realtime session: {e}")
        raise SessionCreationError(f"Error requesting Realtime session: {e}") from e

    if not is_2xx(response):
        logger.error(
            f"Realtime session request failed with status {response.status_code}: {response.text}"
        )
        raise SessionCreationError(
            f"OpenAI responded with status {response.status_code}",
            status_code=response.status_code,
        )

    try:
        data = response.json()
        RealtimeSessionResponse.model_validate(data)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError
        raise SessionCreationError(f"Unexpected Realtime session payload: {e}") from e

    logger.info("Ephemeral key received")
    return data
