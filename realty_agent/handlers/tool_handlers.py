"""
Executes Realtime function calls against an agent's tool logic.

When the model finishes streaming a function call
(``response.function_call_arguments.done``) the browser posts it here. The
handler runs the matching tool and returns the ``conversation.item.create``
event the browser forwards to the model so it can voice the result.
"""

import json
import logging
from typing import Any, Dict

from realty_agent.agents.base import AgentConfig
from realty_agent.config.constants import APOLOGY_MESSAGE, LOGGER_NAME
from realty_agent.models.openai_schemas import (
    FunctionCallOutputEvent,
    FunctionCallOutputItem,
    RealtimeFunctionCall,
)

logger = logging.getLogger(LOGGER_NAME)


def _serialize_output(result: Any) -> str:
    if isinstance(result, str):
        return result
    return json.dumps(result, ensure_ascii=False)


def _error_output(error: str) -> Dict[str, str]:
    return {"error": error, "message": APOLOGY_MESSAGE}


def handle_function_call(
    function_call: RealtimeFunctionCall, agent: AgentConfig
) -> FunctionCallOutputEvent:
    """
    Run the tool named by ``function_call`` and wrap its result.

    Tool failures never propagate: the model receives an error object with
    the apology message so the conversation can continue.

    Args:
        function_call: The function call emitted by the Realtime model
        agent: Agent whose tool logic should handle the call

    Returns:
        A conversation.item.create event carrying the function call output
    """
    logger.info(f"Function call from model: {function_call.name} (call_id={function_call.call_id})")

    tool = agent.get_tool(function_call.name)
    if tool is None:
        logger.warning(f"Agent {agent.name} has no tool named {function_call.name}")
        output: Any = _error_output(f"Unknown tool: {function_call.name}")
    else:
        args = function_call.parsed_arguments()
        logger.debug(f"Function call arguments: {args}")
        try:
            output = tool(args)
        except Exception as e:
            logger.error(f"Tool {function_call.name} failed: {e}", exc_info=True)
            output = _error_output(str(e))

    return FunctionCallOutputEvent(
        item=FunctionCallOutputItem(
            call_id=function_call.call_id, output=_serialize_output(output)
        )
    )
