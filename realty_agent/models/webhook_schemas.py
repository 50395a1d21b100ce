"""
Pydantic models for the local HTTP routes.

These models describe the request and response bodies of the proxy, chat and
webhook-test endpoints consumed by the chat UI.
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD"]


class ErrorResponse(BaseModel):
    """Structured error body returned by every local route."""

    error: str = Field(..., description="Short description of the failure")
    details: Optional[str] = Field(None, description="Upstream body or exception text")


class ChatRequest(BaseModel):
    """Body of ``POST /api/chat``."""

    message: Optional[str] = Field(None, description="Message typed by the user")
    sessionId: Optional[str] = Field(None, description="Conversation identifier")
    agentSet: Optional[str] = Field(None, description="Agent set to route the message to")


class ChatResponse(BaseModel):
    """Body returned by ``POST /api/chat``."""

    response: Any


class WebhookTestRequest(BaseModel):
    """Body of ``POST /api/webhook-test``."""

    webhookUrl: Optional[str] = Field(None, description="Webhook to call")
    method: HttpMethod = Field("POST", description="HTTP method to use")
    payload: Optional[Any] = Field(None, description="JSON body for POST/PUT/PATCH")
    queryParams: Optional[Dict[str, Any]] = Field(
        None, description="Query parameters appended for GET requests"
    )


class WebhookTestResult(BaseModel):
    """Outcome of a diagnostic webhook call."""

    success: bool
    status: int
    statusText: str
    headers: Dict[str, str]
    responseTime: int = Field(..., description="Round trip in milliseconds")
    data: Any
    requestMethod: str
    requestUrl: str
