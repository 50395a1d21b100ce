"""
Models module for the request, response and event structures of the backend.

Key components:
- webhook_schemas: Pydantic models for the local proxy, chat and webhook-test
  routes, including the ``{"error", "details"}`` body shared by every error.
- openai_schemas: Models for the OpenAI Realtime API pieces the backend handles:
  ephemeral sessions, function-tool definitions and function-call events.

Usage examples:
```python
from realty_agent.models import ErrorResponse, RealtimeFunctionCall

error = ErrorResponse(error="Webhook request timed out")
body = error.model_dump(exclude_none=True)

call = RealtimeFunctionCall(name="getPropertyDetails", arguments='{"propertyId": "P-1"}')
args = call.parsed_arguments()
```
"""

from realty_agent.models.openai_schemas import (
    AgentSummary,
    ClientSecret,
    FunctionCallOutputEvent,
    FunctionCallOutputItem,
    FunctionTool,
    RealtimeFunctionCall,
    RealtimeSessionResponse,
)
from realty_agent.models.webhook_schemas import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    WebhookTestRequest,
    WebhookTestResult,
)
