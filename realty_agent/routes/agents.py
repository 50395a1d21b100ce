"""
Agent discovery and tool execution routes.

``GET /api/agents`` gives the browser the instructions and tool definitions it
puts in the Realtime ``session.update``. Function calls the model emits are
posted back to ``/api/agents/{agent_set}/tool-calls`` and answered with the
``conversation.item.create`` event to send over the data channel.
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from realty_agent.agents import AgentSets, find_agent, get_agent_set
from realty_agent.config.constants import LOGGER_NAME
from realty_agent.dependencies import get_agent_sets
from realty_agent.handlers.tool_handlers import handle_function_call
from realty_agent.models.openai_schemas import (
    AgentSummary,
    FunctionCallOutputEvent,
    RealtimeFunctionCall,
)
from realty_agent.routes.responses import error_response

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter(prefix="/api/agents", tags=["Agents"])


@router.get("", response_model=Dict[str, List[AgentSummary]])
def list_agent_sets(agent_sets: AgentSets = Depends(get_agent_sets)):
    """List every agent set with its agents' public configuration."""
    return {
        key: [agent.summary() for agent in agents] for key, agents in agent_sets.items()
    }


@router.post("/{agent_set}/tool-calls", response_model=FunctionCallOutputEvent)
def run_tool_call(
    agent_set: str,
    function_call: RealtimeFunctionCall,
    agent_name: Optional[str] = Query(None, alias="agentName"),
    agent_sets: AgentSets = Depends(get_agent_sets),
):
    """Execute a Realtime function call with the chosen agent's tool logic.

    The first agent of the set handles the call unless ``agentName`` is given.
    """
    agents = get_agent_set(agent_sets, agent_set)
    if not agents:
        return error_response(404, f"Unknown agent set: {agent_set}")

    agent = find_agent(agent_sets, agent_set, agent_name) if agent_name else agents[0]
    if agent is None:
        return error_response(404, f"Unknown agent: {agent_name}")

    return handle_function_call(function_call, agent)
