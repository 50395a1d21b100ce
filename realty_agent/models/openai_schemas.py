"""
Pydantic models for OpenAI Realtime API message structures.

This module provides type-safe models for the pieces of the Realtime API the
backend touches: ephemeral session creation, function-tool definitions, and
the function-call / function-call-output events exchanged with the model.
"""

import json
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from realty_agent.config.constants import (
    EVENT_CONVERSATION_ITEM_CREATE,
    EVENT_FUNCTION_CALL_ARGUMENTS_DONE,
    ITEM_FUNCTION_CALL_OUTPUT,
)


class ClientSecret(BaseModel):
    """Ephemeral credential handed to the browser."""
    value: str
    expires_at: Optional[int] = None


class RealtimeSessionResponse(BaseModel):
    """Response from session creation endpoint."""
    model_config = ConfigDict(extra="allow")

    client_secret: ClientSecret
    id: Optional[str] = None
    expires_at: Optional[int] = None


class FunctionTool(BaseModel):
    """Function tool definition sent in a Realtime ``session.update``."""
    type: Literal["function"] = "function"
    name: str
    description: str
    parameters: Dict[str, Any]


class RealtimeFunctionCall(BaseModel):
    """Function call requested by the model (``response.function_call_arguments.done``)."""
    model_config = ConfigDict(extra="ignore")

    type: Optional[str] = EVENT_FUNCTION_CALL_ARGUMENTS_DONE
    name: str
    call_id: Optional[str] = None
    arguments: str = "{}"

    def parsed_arguments(self) -> Dict[str, Any]:
        """Decode ``arguments``; anything but a JSON object yields an empty dict."""
        try:
            parsed = json.loads(self.arguments or "{}")
        except ValueError:
            return {}
        return parsed if isinstance(parsed, dict) else {}


class FunctionCallOutputItem(BaseModel):
    """Conversation item carrying a tool result back to the model."""
    type: Literal["function_call_output"] = ITEM_FUNCTION_CALL_OUTPUT
    call_id: Optional[str] = None
    output: str


class FunctionCallOutputEvent(BaseModel):
    """``conversation.item.create`` event wrapping a function call output."""
    type: Literal["conversation.item.create"] = EVENT_CONVERSATION_ITEM_CREATE
    item: FunctionCallOutputItem


class AgentSummary(BaseModel):
    """Public view of an agent configuration."""
    name: str
    public_description: str = Field(alias="publicDescription")
    instructions: str
    tools: List[FunctionTool]

    model_config = ConfigDict(populate_by_name=True)
