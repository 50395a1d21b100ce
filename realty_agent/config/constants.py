"""
Constants and configuration values used throughout the application.

This module defines constants that are used across different parts of the application,
providing a centralized location for configuration values and making it easier to
maintain consistent naming throughout the codebase.
"""

# Logger name used throughout the application
LOGGER_NAME = "realty_agent"

# External n8n workflow that performs the real-estate lookups
REALTY_WEBHOOK_URL = (
    "https://n8n-railway-custom-production-953e.up.railway.app/webhook/realty-agent"
)

# Query parameter names understood by the webhook and the local proxy
MESSAGE_PARAM = "message"
CONTACT_MESSAGE_PARAM = "contactMessage"
SESSION_ID_PARAM = "sessionId"

# Keys looked up, in order, when an outbound message is a JSON object
MESSAGE_KEYS = ("text", "query", "message")

# Key holding the canonical result in a webhook response
OUTPUT_KEY = "output"

# Retry policy for webhook lookups
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_INITIAL_BACKOFF_MS = 300

# Timeouts (seconds)
WEBHOOK_TIMEOUT = 15
WEBHOOK_TEST_TIMEOUT = 10
OPENAI_SESSION_TIMEOUT = 10

# OpenAI Realtime defaults
OPENAI_REALTIME_SESSIONS_URL = "https://api.openai.com/v1/realtime/sessions"
DEFAULT_REALTIME_MODEL = "gpt-4o-realtime-preview-2024-12-17"
DEFAULT_VOICE = "coral"

# Realtime event types
EVENT_FUNCTION_CALL_ARGUMENTS_DONE = "response.function_call_arguments.done"
EVENT_CONVERSATION_ITEM_CREATE = "conversation.item.create"
ITEM_FUNCTION_CALL_OUTPUT = "function_call_output"

# Agent sets
DEFAULT_AGENT_SET_KEY = "simpleExample"
WEBHOOK_TOOL_NAME = "webhookRequestLookup"

# Shown to the user when a lookup fails after all retries
APOLOGY_MESSAGE = (
    "Sorry, I encountered an error processing your real estate query. "
    "Please try again."
)
