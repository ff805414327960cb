"""
Simulated transport - the asynchronous boundary in front of every mutation.

Each call waits a fixed latency, may fail at a configured rate, and holds a
per-kind loading flag for its whole duration. A second mutation on a kind
that is still loading is refused; other kinds stay available.
"""

import asyncio
import logging
import random
from typing import Callable, Dict, Hashable, Optional, TypeVar

from careerhub.core.errors import ResourceBusy, SimulatedTransportFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SimulatedTransport:

    def __init__(self, latency_seconds: float = 1.0, failure_rate: float = 0.0, rng: Optional[random.Random] = None):
        self.latency_seconds = latency_seconds
        self.failure_rate = failure_rate
        self._rng = rng or random.Random()
        self._loading: Dict[Hashable, bool] = {}

    def is_loading(self, key: Hashable) -> bool:
        return self._loading.get(key, False)

    def loading_flags(self) -> Dict[str, bool]:
        return {getattr(k, "value", str(k)): v for k, v in self._loading.items()}

    async def round_trip(self, key: Hashable, operation: Callable[[], T]) -> T:
        """Run operation() after the simulated delay, holding key's loading flag."""
        if self.is_loading(key):
            raise ResourceBusy(f"Another {getattr(key, 'value', key)} action is still in progress")

        self._loading[key] = True
        try:
            if self.latency_seconds > 0:
                await asyncio.sleep(self.latency_seconds)
            if self.failure_rate > 0 and self._rng.random() < self.failure_rate:
                logger.warning("Simulated transport failure for %s", key)
                raise SimulatedTransportFailure("Action failed. Please try again.")
            return operation()
        finally:
            self._loading[key] = False
