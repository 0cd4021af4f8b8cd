"""Exponential backoff with jitter for provider retries."""

import random
from collections.abc import Callable


class BackoffPolicy:
    """
    Compute the wait before each retry.

    delay(n) = min(base * 2 ** (n - 1), max_delay) * (1 + jitter * U[0, 1))
    where n is the 1-based retry number.
    """

    def __init__(
        self,
        base: float = 1.0,
        max_delay: float = 30.0,
        jitter: float = 0.1,
        rng: Callable[[], float] = random.random,
    ) -> None:
        if base < 0:
            raise ValueError("base must not be negative")
        if max_delay < base:
            raise ValueError("max_delay must be greater than or equal to base")
        if not 0 <= jitter <= 1:
            raise ValueError("jitter must be between 0.0 and 1.0")

        self.base = base
        self.max_delay = max_delay
        self.jitter = jitter
        self.rng = rng

    def delay(self, retry: int) -> float:
        """Seconds to wait before the given retry (1-based)."""
        if retry < 1:
            raise ValueError("retry numbers start at 1")
        delay = min(self.base * (2 ** (retry - 1)), self.max_delay)
        return delay * (1 + self.jitter * self.rng())
