"""
Configuration module for the realty agent backend.

This module provides centralized configuration management for the entire application,
including constants, logging setup, and environment-based configuration.

Key components:
- constants: Defines application-wide constants such as the n8n webhook URL,
  query parameter names, retry defaults, timeouts and Realtime model settings.
- logging_config: Provides a consistent logging infrastructure with support for
  console and file-based logging with rotation capabilities.

Usage examples:
```python
from realty_agent.config.constants import LOGGER_NAME, REALTY_WEBHOOK_URL

from realty_agent.config.logging_config import configure_logging
logger = configure_logging()
logger.info("Application started")
```
"""
