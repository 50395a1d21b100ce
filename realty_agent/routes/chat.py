"""
Text chat route.

Routes a typed message to the ``webhookRequestLookup`` tool of the first agent
in the selected agent set, the same path a voice turn takes when the model
calls that tool.
"""

import logging

from fastapi import APIRouter, Depends

from realty_agent.agents import AgentSets, get_agent_set
from realty_agent.config.constants import DEFAULT_AGENT_SET_KEY, LOGGER_NAME, WEBHOOK_TOOL_NAME
from realty_agent.dependencies import get_agent_sets
from realty_agent.models.webhook_schemas import ChatRequest, ChatResponse
from realty_agent.routes.responses import error_response

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter(prefix="/api", tags=["Chat"])


@router.post("/chat", response_model=ChatResponse)
def chat(request: ChatRequest, agent_sets: AgentSets = Depends(get_agent_sets)):
    """Answer a chat message through the selected agent's webhook tool."""
    logger.info("Received chat webhook request")

    if not request.message:
        logger.error("Missing message in request body")
        return error_response(400, "Missing message in request body")

    logger.info(f"Processing message: {request.message}")
    if request.sessionId:
        logger.info(f"With sessionId: {request.sessionId}")

    set_key = request.agentSet or DEFAULT_AGENT_SET_KEY
    agent_set = get_agent_set(agent_sets, set_key)
    if agent_set is None:
        logger.error(f"Unknown agent set: {set_key}")
        return error_response(404, f"Unknown agent set: {set_key}")
    if not agent_set:
        logger.error("No agent configuration found")
        return error_response(500, "No agent configuration found")

    agent = agent_set[0]
    tool = agent.get_tool(WEBHOOK_TOOL_NAME)
    if tool is None:
        logger.error(f"Agent {agent.name} does not support webhook")
        return error_response(500, "Agent does not support webhook")

    try:
        logger.info(f"Calling {agent.name} webhook tool")
        response = tool({"message": request.message, "sessionId": request.sessionId})
    except Exception as e:
        logger.error(f"Error processing webhook request: {e}", exc_info=True)
        return error_response(500, "Error processing webhook request", str(e))

    logger.info(f"Agent response: {response}")
    return ChatResponse(response=response)
