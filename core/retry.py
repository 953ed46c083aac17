# core/retry.py

"""
Explicit retry policy for the orchestrator's call step.

The default policy makes exactly one attempt, so a failed call surfaces straight
away and retrying is left to the user. Configuring more attempts makes the policy
re-issue a call that raised `ServiceError`, waiting a fixed delay in between.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from core.client import ServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryPolicy:

    def __init__(self, attempts: int = 1, delay: float = 0.0):
        if attempts < 1:
            raise ValueError("A retry policy needs at least one attempt.")

        self._attempts = attempts
        self._delay = delay

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def delay(self) -> float:
        return self._delay

    async def call(self, step: Callable[[], Awaitable[T]]) -> T:
        """
        Runs `step` until it succeeds or the attempts are used up.

        Args:
            step (Callable[[], Awaitable[T]]): A zero-argument coroutine function issuing one remote call.

        Returns:
            Whatever `step` returns on its first successful attempt.

        Raises:
            ServiceError: The error from the last attempt.

        Notes:
            - Only `ServiceError` triggers another attempt. Anything else propagates immediately.
            - Retrying a create that failed after reaching the server can create a duplicate record.
        """
        attempt = 1

        while True:
            try:
                return await step()

            except ServiceError as e:
                if attempt >= self._attempts:
                    raise

                logger.warning(
                    "%s call failed (attempt %d of %d): %s",
                    e.action,
                    attempt,
                    self._attempts,
                    e,
                )

            await asyncio.sleep(self._delay)
            attempt += 1


NO_RETRY = RetryPolicy()
