"""Ephemeral key route used by the browser before opening a Realtime session."""

import logging

import requests
from fastapi import APIRouter, Depends

from realty_agent.config.constants import LOGGER_NAME
from realty_agent.dependencies import get_http_session
from realty_agent.exceptions import MissingAPIKeyError, SessionCreationError
from realty_agent.routes.responses import error_response
from realty_agent.services.realtime_session import create_realtime_session

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter(prefix="/api", tags=["Session"])


@router.get("/session")
def create_session(session: requests.Session = Depends(get_http_session)):
    """Mint an OpenAI Realtime session and return it with its ``client_secret``."""
    try:
        return create_realtime_session(session=session)
    except MissingAPIKeyError as e:
        logger.error(str(e))
        return error_response(500, "Failed to create Realtime session", str(e))
    except SessionCreationError as e:
        return error_response(502, "Failed to create Realtime session", str(e))
