"""
Realty personas backed by the n8n webhook.

Both agents answer property questions about Noida by delegating every tool
call to the webhook through ``RealtyWebhookClient.lookup``. Structured tools
(property details, comparisons, amenity search) encode their arguments as a
JSON object tagged with ``request_type``; since those objects carry no
``text``/``query``/``message`` key they reach the webhook re-serialized whole.
"""

import json
import logging
from typing import Any, Dict, Optional

from realty_agent.agents.base import (
    AgentConfig,
    function_tool,
    string_list_param,
    string_param,
)
from realty_agent.config.constants import LOGGER_NAME, WEBHOOK_TOOL_NAME
from realty_agent.services.webhook_client import RealtyWebhookClient

logger = logging.getLogger(LOGGER_NAME)

PUBLIC_DESCRIPTION = (
    "An agent specializing in Noida real estate. Can search for properties, "
    "provide details about localities and projects."
)

REALTY_INSTRUCTIONS = """You are a knowledgeable real estate agent specializing in Noida, India.
You have extensive knowledge about different sectors, housing projects, and property options in Noida.
You can help users find properties, understand locality features, and compare different options.
Always be helpful, accurate, and provide detailed responses about real estate in Noida."""

MOBILE_INSTRUCTIONS = """You are a real estate agent in Noida with more than ten years of experience helping buyers find their home.

You know Noida's localities, societies and market trends in depth. Home buying is overwhelming, so listen first,
ask questions and clarify preferences before you recommend anything. Match homes to what matters to each buyer
and refine the search from their feedback.

Adapt to the buyer's stage: early-stage buyers need market insight and clarity, mid-stage buyers have a budget,
BHK type and location in mind, late-stage buyers are comparing a shortlist and verifying deals.

Rules:
- Ask only one question at a time and wait for the answer.
- If details are missing, ask a follow-up question before suggesting properties.
- Start with budget and location, then amenities, builder reputation and floor preference.
- Use simple language and explain real estate terms."""


def _require(args: Dict[str, Any], key: str) -> Any:
    value = args.get(key)
    if value in (None, "", []):
        raise ValueError(f"Missing required argument: {key}")
    return value


def _build_tool_logic(client: RealtyWebhookClient, forward_session_id: bool):
    """Create the tool callables bound to ``client``."""

    def webhook_request_lookup(args: Dict[str, Any]) -> Any:
        message = args.get("message") or args.get("contactMessage")
        if not message:
            raise ValueError("Missing required argument: message")
        if not isinstance(message, str):
            message = json.dumps(message)
        session_id = args.get("sessionId") if forward_session_id else None
        logger.info(f"Making webhook request with message: {message}")
        return client.lookup(message, session_id=session_id)

    def get_property_details(args: Dict[str, Any]) -> Any:
        property_id = _require(args, "propertyId")
        logger.info(f"Getting property details for ID: {property_id}")
        message = json.dumps(
            {"request_type": "property_details", "property_id": property_id}
        )
        return client.lookup(message)

    def compare_properties(args: Dict[str, Any]) -> Any:
        property_ids = _require(args, "properties")
        message = json.dumps(
            {"request_type": "compare_properties", "property_ids": property_ids}
        )
        return client.lookup(message)

    def search_by_amenities(args: Dict[str, Any]) -> Any:
        amenities = _require(args, "amenities")
        message = json.dumps(
            {
                "request_type": "search_by_amenities",
                "amenities": amenities,
                "location": args.get("location") or "",
            }
        )
        return client.lookup(message)

    return {
        WEBHOOK_TOOL_NAME: webhook_request_lookup,
        "getPropertyDetails": get_property_details,
        "compareProperties": compare_properties,
        "searchByAmenities": search_by_amenities,
    }


def _property_tools(lookup_tool):
    return [
        lookup_tool,
        function_tool(
            "getPropertyDetails",
            "Get detailed information about a specific property",
            {"propertyId": string_param("ID of the property to get details for")},
            ["propertyId"],
        ),
        function_tool(
            "compareProperties",
            "Compare multiple properties",
            {"properties": string_list_param("Array of property IDs to compare")},
            ["properties"],
        ),
        function_tool(
            "searchByAmenities",
            "Search for properties by amenities",
            {
                "amenities": string_list_param("List of amenities to search for"),
                "location": string_param("Optional location to filter by"),
            },
            ["amenities"],
        ),
    ]


def create_realty_agent(client: RealtyWebhookClient) -> AgentConfig:
    """Create the desktop realty agent."""
    lookup_tool = function_tool(
        WEBHOOK_TOOL_NAME,
        "Look up information about localities and projects in Noida",
        {
            "message": string_param(
                "JSON format message with query details. Can include query_type "
                "(locality, project, property_type), search_term, filters, and "
                "request_type (general_lookup)"
            )
        },
        ["message"],
    )
    return AgentConfig(
        name="Realty Agent",
        public_description=PUBLIC_DESCRIPTION,
        instructions=REALTY_INSTRUCTIONS,
        tools=_property_tools(lookup_tool),
        tool_logic=_build_tool_logic(client, forward_session_id=False),
    )


def create_realty_mobile_agent(
    client: RealtyWebhookClient, custom_instructions: Optional[str] = None
) -> AgentConfig:
    """
    Create the mobile realty agent.

    Args:
        client: Webhook client the tools delegate to
        custom_instructions: Instructions overriding the default persona prompt

    Returns:
        The agent configuration; its lookup tool forwards ``sessionId``
    """
    instructions = custom_instructions or MOBILE_INSTRUCTIONS
    logger.info(f"Creating realty mobile agent with instructions: {instructions[:50]}...")
    lookup_tool = function_tool(
        WEBHOOK_TOOL_NAME,
        "Look up information about localities and projects in Noida",
        {
            "message": string_param(
                "The message or query to send to the webhook (this will be sent "
                "as 'contactMessage' parameter)"
            ),
            "sessionId": string_param("Optional session ID to identify the conversation"),
        },
        ["message"],
    )
    return AgentConfig(
        name="Realty Mobile Agent",
        public_description=PUBLIC_DESCRIPTION,
        instructions=instructions,
        tools=_property_tools(lookup_tool),
        tool_logic=_build_tool_logic(client, forward_session_id=True),
    )
