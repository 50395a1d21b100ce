"""
Agent configuration shared by every persona.

An agent pairs the Realtime session settings the browser sends in
``session.update`` (instructions and function tools) with the Python callables
that execute those tools on the server.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from realty_agent.models.openai_schemas import AgentSummary, FunctionTool

ToolFunc = Callable[[Dict[str, Any]], Any]


@dataclass
class AgentConfig:
    """A persona with its Realtime tools and the logic behind them."""

    name: str
    public_description: str
    instructions: str
    tools: List[FunctionTool] = field(default_factory=list)
    tool_logic: Dict[str, ToolFunc] = field(default_factory=dict)

    def get_tool(self, name: str) -> Optional[ToolFunc]:
        return self.tool_logic.get(name)

    def summary(self) -> AgentSummary:
        return AgentSummary(
            name=self.name,
            public_description=self.public_description,
            instructions=self.instructions,
            tools=self.tools,
        )


def string_param(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def string_list_param(description: str) -> Dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


def function_tool(
    name: str,
    description: str,
    properties: Dict[str, Dict[str, Any]],
    required: List[str],
) -> FunctionTool:
    """Build a function tool whose parameters form a JSON-schema object."""
    return FunctionTool(
        name=name,
        description=description,
        parameters={"type": "object", "properties": properties, "required": required},
    )
