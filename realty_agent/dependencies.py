"""
FastAPI dependencies shared by the routes.

Routes never create HTTP sessions or webhook clients themselves; tests swap
these providers through ``app.dependency_overrides``.
"""

from functools import lru_cache

import requests
from fastapi import Depends

from realty_agent.agents import AgentSets, build_agent_sets
from realty_agent.services.webhook_client import RealtyWebhookClient


@lru_cache(maxsize=1)
def get_http_session() -> requests.Session:
    """Return the process-wide requests session used for outbound calls."""
    return requests.Session()


def get_webhook_client(
    session: requests.Session = Depends(get_http_session),
) -> RealtyWebhookClient:
    return RealtyWebhookClient(session=session)


def get_agent_sets(
    client: RealtyWebhookClient = Depends(get_webhook_client),
) -> AgentSets:
    return build_agent_sets(client)
