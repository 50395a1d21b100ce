"""
HTTP routes exposed to the chat UI.

Key components:
- realty: ``/api/realty`` GET/POST proxy to the n8n webhook
- chat: ``/api/chat`` text chat through an agent's webhook tool
- agents: ``/api/agents`` agent discovery and Realtime tool-call execution
- webhook_test: ``/api/webhook-test`` diagnostic webhook proxy
- session: ``/api/session`` OpenAI Realtime ephemeral key minting
"""

from realty_agent.routes.agents import router as agents_router
from realty_agent.routes.chat import router as chat_router
from realty_agent.routes.realty import router as realty_router
from realty_agent.routes.session import router as session_router
from realty_agent.routes.webhook_test import router as webhook_test_router

__all__ = [
    "agents_router",
    "chat_router",
    "realty_router",
    "session_router",
    "webhook_test_router",
]
