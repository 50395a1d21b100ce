"""
Exception hierarchy for the realty agent backend.

Routes translate these into structured ``{"error", "details"}`` bodies; the
services raise them when an upstream call cannot produce a usable answer.
"""

from typing import Optional


class RealtyAgentError(Exception):
    """Base class for all errors raised by this package."""


class UpstreamStatusError(RealtyAgentError):
    """An upstream service answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Request failed with status {status_code}")


class WebhookLookupError(RealtyAgentError):
    """A webhook lookup failed after every retry attempt."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(f"Failed to fetch data from webhook: {reason}")


class SessionCreationError(RealtyAgentError):
    """An OpenAI Realtime ephemeral session could not be created."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class MissingAPIKeyError(SessionCreationError):
    """No OpenAI API key is configured."""
