"""
Retry wrapper for outbound HTTP calls.

A failed attempt is either a raised exception or a response whose status
code is outside 200-299 (redirects included); both consume one attempt and
trigger the same backoff.
The backoff starts at ``initial_backoff_ms`` and doubles after every failure.
There is no jitter and no distinction between 4xx and 5xx statuses.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, TypeVar

from realty_agent.config.constants import (
    DEFAULT_INITIAL_BACKOFF_MS,
    DEFAULT_MAX_ATTEMPTS,
    LOGGER_NAME,
)
from realty_agent.exceptions import UpstreamStatusError

logger = logging.getLogger(LOGGER_NAME)

T = TypeVar("T")


@dataclass
class RetryState:
    """Attempt counter and current backoff for a single retry sequence."""

    attempts_remaining: int
    backoff_ms: int

    @property
    def exhausted(self) -> bool:
        return self.attempts_remaining <= 0

    def next_backoff(self) -> int:
        """Return the delay to wait now and double it for the next failure."""
        delay = self.backoff_ms
        self.backoff_ms *= 2
        return delay


def is_2xx(response) -> bool:
    """Return True when ``response`` carries a 2xx status code."""
    return 200 <= response.status_code < 300


def _is_success(result) -> bool:
    # Objects without a ``status_code`` are plain results, not HTTP responses
    if not hasattr(result, "status_code"):
        return True
    return is_2xx(result)


def with_retry(
    call: Callable[[], T],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_backoff_ms: int = DEFAULT_INITIAL_BACKOFF_MS,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Invoke ``call`` until it succeeds or ``max_attempts`` attempts are used.

    Args:
        call: Zero-argument callable performing one attempt
        max_attempts: Total number of attempts, at least 1
        initial_backoff_ms: Delay before the second attempt, in milliseconds
        sleep: Function used to wait between attempts, takes seconds

    Returns:
        The first successful result of ``call``

    Raises:
        UpstreamStatusError: If the last attempt returned a non-2xx response
        Exception: Whatever the last attempt raised
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    if initial_backoff_ms <= 0:
        raise ValueError("initial_backoff_ms must be positive")

    state = RetryState(attempts_remaining=max_attempts, backoff_ms=initial_backoff_ms)

    while True:
        state.attempts_remaining -= 1
        attempt = max_attempts - state.attempts_remaining

        try:
            result = call()
        except Exception as e:
            failure = e
        else:
            if _is_success(result):
                if attempt > 1:
                    logger.info(f"Request succeeded on attempt {attempt}/{max_attempts}")
                return result
            failure = UpstreamStatusError(
                getattr(result, "status_code", 0), getattr(result, "text", "")
            )

        if state.exhausted:
            logger.error(f"Request failed after {max_attempts} attempts: {failure}")
            raise failure

        delay_ms = state.next_backoff()
        logger.warning(
            f"Attempt {attempt}/{max_attempts} failed ({failure}), "
            f"retrying in {delay_ms}ms, {state.attempts_remaining} attempts left"
        )
        sleep(delay_ms / 1000)
