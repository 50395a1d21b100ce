"""
Handlers module for events coming from the OpenAI Realtime session.

Key components:
- tool_handlers: Runs the function calls emitted by the Realtime model against
  the selected agent's tool logic and builds the ``conversation.item.create``
  event that returns the result to the model.

Usage examples:
```python
from realty_agent.handlers.tool_handlers import handle_function_call
from realty_agent.models import RealtimeFunctionCall

event = handle_function_call(
    RealtimeFunctionCall(name="webhookRequestLookup", call_id="call_1",
                         arguments='{"message": "2BHK in Sector 150"}'),
    agent,
)
data_channel.send(event.model_dump_json())
```
"""
