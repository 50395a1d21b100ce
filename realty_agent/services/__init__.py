"""
Services module for external API integrations in the realty agent backend.

Key components:
- retry: ``with_retry`` wraps a single outbound call with up to three attempts
  and exponential backoff (300 ms, 600 ms, ...), counting non-2xx responses
  and raised exceptions alike.
- webhook_client: ``RealtyWebhookClient`` for the n8n realty webhook, plus the
  message-sniffing and response-normalization helpers it uses.
- realtime_session: Ephemeral key minting for OpenAI Realtime sessions.

Usage examples:
```python
from realty_agent.services.webhook_client import RealtyWebhookClient

client = RealtyWebhookClient()
result = client.lookup('{"query": "3BHK near Sector 62"}', session_id="abc-123")
```
"""
