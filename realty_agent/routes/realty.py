"""
Local proxy routes for the n8n realty webhook.

The chat UI calls these endpoints instead of the webhook so that browsers are
not subject to cross-origin restrictions. Each request is forwarded once;
failures are mapped to distinct statuses:

- 400: neither ``contactMessage`` nor ``message`` was supplied
- 502: the webhook answered with a non-2xx status
- 504: the webhook did not answer before the timeout
- 500: any other fetch or processing failure
"""

import logging
from typing import Optional

import requests
from fastapi import APIRouter, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from realty_agent.config.constants import (
    CONTACT_MESSAGE_PARAM,
    LOGGER_NAME,
    MESSAGE_PARAM,
    SESSION_ID_PARAM,
    WEBHOOK_TIMEOUT,
)
from realty_agent.dependencies import get_webhook_client
from realty_agent.routes.responses import error_response
from realty_agent.services.retry import is_2xx
from realty_agent.services.webhook_client import RealtyWebhookClient, parse_response_body

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter(prefix="/api", tags=["Realty"])


@router.get("/realty")
def realty_lookup(
    contact_message: Optional[str] = Query(None, alias=CONTACT_MESSAGE_PARAM),
    message: Optional[str] = Query(None, alias=MESSAGE_PARAM),
    session_id: Optional[str] = Query(None, alias=SESSION_ID_PARAM),
    client: RealtyWebhookClient = Depends(get_webhook_client),
):
    """Forward a message to the webhook as ``contactMessage`` and return its JSON.

    ``contactMessage`` takes precedence over ``message`` when both are given.
    """
    outbound = contact_message or message
    logger.info(f"Received realty lookup with message: {outbound}")

    if not outbound:
        logger.error("Missing required message parameter in GET request")
        return error_response(
            400, 'Missing required message parameter (use "contactMessage" or "message")'
        )

    if session_id:
        logger.info(f"Forwarding with sessionId: {session_id}")

    try:
        try:
            response = client.forward(outbound, session_id)
        except requests.Timeout:
            logger.error(f"Request to webhook timed out after {WEBHOOK_TIMEOUT} seconds")
            return error_response(
                504,
                "Webhook request timed out",
                "The external service took too long to respond",
            )
        except requests.RequestException as e:
            logger.error(f"Error during fetch to webhook: {e}")
            return error_response(500, "Error during fetch to webhook", str(e))

        logger.info(f"Webhook response status: {response.status_code}")
        if not is_2xx(response):
            logger.error(f"Error from webhook: {response.text}")
            return error_response(
                502, f"Error from webhook ({response.status_code})", response.text
            )

        data = parse_response_body(response)
        logger.debug(f"Webhook response data: {data}")
        return JSONResponse(content=data)
    except Exception as e:
        logger.error(f"Error processing webhook request: {e}", exc_info=True)
        return error_response(500, "Error processing webhook request", str(e))


@router.post("/realty")
async def realty_forward(
    request: Request,
    client: RealtyWebhookClient = Depends(get_webhook_client),
):
    """Forward the JSON request body to the webhook and relay its answer."""
    logger.info("Handling POST request to /api/realty")
    try:
        body = await request.json()
        logger.debug(f"Request body: {body}")
        response = await run_in_threadpool(client.post, body)

        if not is_2xx(response):
            logger.error(f"Webhook responded with status: {response.status_code}")
            return error_response(
                response.status_code, f"Webhook responded with status: {response.status_code}"
            )

        data = parse_response_body(response)
        logger.debug(f"Webhook response: {data}")
        return JSONResponse(content=data)
    except Exception as e:
        logger.error(f"Error forwarding POST request to webhook: {e}")
        return error_response(500, f"Error forwarding request: {e}")
