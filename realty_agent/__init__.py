"""
Realty Agent - backend for an OpenAI Realtime real-estate chat assistant

This application serves the web and mobile chat UI of a voice/text assistant
specialized in Noida real estate. The browser holds the OpenAI Realtime
session; the actual property lookups are performed by an external n8n
workflow reached through this server.

Architecture Overview:
- FastAPI server exposing the local proxy, chat, agent and session routes
- Webhook client with message sniffing, retries and response normalization
- Agent configurations pairing Realtime tool definitions with Python tool logic
- Stateless request handling: nothing is cached or persisted between requests

Key Components:
- agents: Agent personas (realty, realty mobile, simple example) and their tools
- config: Application-wide constants and logging setup
- handlers: Execution of Realtime function calls against agent tools
- models: Pydantic models for route bodies and Realtime events
- routes: FastAPI routers for the HTTP endpoints
- services: Webhook client, retry wrapper and Realtime session minting

Getting Started:
1. Set up environment variables (or a .env file):
   - OPENAI_API_KEY: Your OpenAI API key, needed for /api/session
   - PORT: Port to run the server on (default 8000)
   - HOST: Host to bind the server to (default 0.0.0.0)
   - LOG_LEVEL: Logging level (default INFO)

2. Start the server:
   ```bash
   python run.py
   ```
"""
