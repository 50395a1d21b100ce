"""
Agent sets available to the chat UI.

Each agent set is a list of agent configurations; the UI selects a set by key
and opens its Realtime session with the first agent's instructions and tools.

Usage examples:
```python
from realty_agent.agents import build_agent_sets, get_agent_set
from realty_agent.services.webhook_client import RealtyWebhookClient

agent_sets = build_agent_sets(RealtyWebhookClient())
agent = get_agent_set(agent_sets, "realtyMobileAgent")[0]
result = agent.get_tool("getPropertyDetails")({"propertyId": "P-17"})
```
"""

import logging
from typing import Dict, List, Optional

from realty_agent.agents.base import AgentConfig
from realty_agent.agents.realty import create_realty_agent, create_realty_mobile_agent
from realty_agent.agents.simple_example import create_simple_example_agent
from realty_agent.config.constants import DEFAULT_AGENT_SET_KEY, LOGGER_NAME
from realty_agent.services.webhook_client import RealtyWebhookClient

logger = logging.getLogger(LOGGER_NAME)

AgentSets = Dict[str, List[AgentConfig]]


def build_agent_sets(client: RealtyWebhookClient) -> AgentSets:
    """Create every agent set, with realty tools bound to ``client``."""
    agent_sets = {
        "simpleExample": [create_simple_example_agent()],
        "realtyAgent": [create_realty_agent(client)],
        "realtyMobileAgent": [create_realty_mobile_agent(client)],
    }
    for key, agents in agent_sets.items():
        for agent in agents:
            logger.debug(f"Loaded agent set {key}: {agent.name} with tools {list(agent.tool_logic)}")
    return agent_sets


def get_agent_set(agent_sets: AgentSets, key: Optional[str] = None) -> Optional[List[AgentConfig]]:
    """Return the agent set stored under ``key`` (default set when omitted)."""
    return agent_sets.get(key or DEFAULT_AGENT_SET_KEY)


def find_agent(agent_sets: AgentSets, key: str, name: str) -> Optional[AgentConfig]:
    """Find an agent by set key and agent name."""
    for agent in agent_sets.get(key) or []:
        if agent.name == name:
            return agent
    return None


__all__ = [
    "AgentConfig",
    "AgentSets",
    "build_agent_sets",
    "find_agent",
    "get_agent_set",
]
