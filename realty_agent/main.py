"""
FastAPI server for the realty agent chat front-end.

This module initializes and configures the FastAPI application that backs the
web and mobile chat UI. The browser talks to OpenAI Realtime directly with an
ephemeral key minted here, and relies on this server to reach the n8n realty
webhook, execute agent tools and run diagnostic webhook tests.
"""

import os
from pathlib import Path

import dotenv
from fastapi import Depends, FastAPI

from realty_agent.config.constants import REALTY_WEBHOOK_URL
from realty_agent.config.logging_config import configure_logging
from realty_agent.dependencies import get_webhook_client
from realty_agent.routes import (
    agents_router,
    chat_router,
    realty_router,
    session_router,
    webhook_test_router,
)
from realty_agent.services.webhook_client import RealtyWebhookClient

# Load environment variables from .env file if it exists
env_path = Path(".") / ".env"
if env_path.exists():
    dotenv.load_dotenv(env_path)

logger = configure_logging()

PORT = int(os.getenv("PORT", "8000"))
HOST = os.getenv("HOST", "0.0.0.0")

app = FastAPI(
    title="Realty Agent",
    description="Chat backend connecting OpenAI Realtime agents to the n8n realty webhook",
    version="1.0.0",
)

app.include_router(realty_router)
app.include_router(chat_router)
app.include_router(agents_router)
app.include_router(webhook_test_router)
app.include_router(session_router)


@app.get("/health")
def health_check():
    """Health check endpoint for monitoring system status.

    Returns:
        dict: Status information indicating the server is operational.
    """
    return {
        "status": "healthy",
        "openai_api_key_configured": bool(os.getenv("OPENAI_API_KEY")),
        "webhook_url": REALTY_WEBHOOK_URL,
    }


@app.get("/health/webhook")
def webhook_health(client: RealtyWebhookClient = Depends(get_webhook_client)):
    """Probe the n8n webhook with a test message."""
    return {"webhook_reachable": client.probe()}


@app.get("/")
def root():
    """Root endpoint to display basic information about the API.

    Returns:
        dict: Basic information about the API and its purpose.
    """
    return {
        "name": "Realty Agent",
        "description": "Chat backend connecting OpenAI Realtime agents to the n8n realty webhook",
        "version": "1.0.0",
        "endpoints": {
            "/api/realty": "Proxy to the n8n realty webhook (GET and POST)",
            "/api/chat": "Text chat through an agent's webhook tool",
            "/api/agents": "Agent sets and Realtime tool-call execution",
            "/api/webhook-test": "Diagnostic webhook proxy",
            "/api/session": "OpenAI Realtime ephemeral key",
            "/health": "Health check endpoint",
        },
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, http="h11")
