"""Echo persona used to exercise the chat flow without the webhook."""

import logging
import random
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from realty_agent.agents.base import AgentConfig, function_tool, string_param
from realty_agent.config.constants import LOGGER_NAME, WEBHOOK_TOOL_NAME

logger = logging.getLogger(LOGGER_NAME)

RESPONSE_PREFIXES = [
    "I'm a simple example agent. I can help answer basic questions.",
    "That's an interesting question! Let me think about it...",
    "I understand your query. Here's what I can tell you:",
    "Thanks for your message. I'm processing your request.",
    "I appreciate your question. Here's my response:",
]


def _specific_response(message: str, now: datetime) -> str:
    text = message.lower()
    if "hello" in text or "hi" in text:
        return "Hello! How can I assist you today?"
    if "help" in text:
        return "I can help you with basic information and answer questions about this demo."
    if "weather" in text:
        return (
            "I don't have access to real-time weather data, but I can tell you "
            "it's always sunny in the world of code!"
        )
    if "time" in text:
        return f"The current time is {now.strftime('%H:%M:%S')}."
    if "date" in text:
        return f"Today's date is {now.strftime('%Y-%m-%d')}."
    if "name" in text:
        return "My name is Simple Agent. I'm a demonstration of the OpenAI Realtime Agents platform."
    if "thank" in text:
        return "You're welcome! Is there anything else I can help with?"
    return (
        f'You said: "{message}". This is a simple echo response to demonstrate '
        "the webhook functionality."
    )


def create_simple_example_agent(
    choose: Callable[[list], str] = random.choice,
    clock: Optional[Callable[[], datetime]] = None,
) -> AgentConfig:
    """Create the echo agent; ``choose`` and ``clock`` are injectable for tests."""
    clock = clock or datetime.now

    def webhook_request_lookup(args: Dict[str, Any]) -> str:
        message = str(args.get("message") or "")
        logger.info(f"Processing webhook request: {message}")
        response = f"{choose(RESPONSE_PREFIXES)} {_specific_response(message, clock())}"
        logger.debug(f"Generated response: {response}")
        return response

    return AgentConfig(
        name="Simple Example Agent",
        public_description="A simple example agent that demonstrates basic functionality.",
        instructions=(
            "You are a helpful assistant that responds to user queries with simple, "
            "friendly answers."
        ),
        tools=[
            function_tool(
                WEBHOOK_TOOL_NAME,
                "Process a webhook request and generate a response",
                {"message": string_param("The message from the user")},
                ["message"],
            )
        ],
        tool_logic={WEBHOOK_TOOL_NAME: webhook_request_lookup},
    )
