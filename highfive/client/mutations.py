"""
Mutation Executor
Single write followed by invalidation of dependent query keys
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Optional
from highfive.client.errors import HighFiveError
from highfive.client.query_cache import QueryCache, QueryKey

logger = logging.getLogger(__name__)


@dataclass
class MutationResult:
    ok: bool
    data: Any = None
    error: Optional[HighFiveError] = None


class MutationExecutor:
    """
    Runs exactly one write per call.

    The cache is never edited directly: on success the listed keys are
    invalidated and their refetches awaited, so callers see committed state
    when ``mutate`` returns. Failures come back in the result and nothing is
    invalidated or retried.
    """

    def __init__(self, cache: QueryCache):
        self.cache = cache

    async def mutate(
        self,
        operation: Callable[[], Awaitable[Any]],
        invalidates: Iterable[QueryKey] = ()
    ) -> MutationResult:
        try:
            data = await operation()
        except HighFiveError as e:
            logger.warning("Mutation failed: %s", e.message)
            return MutationResult(ok=False, error=e)

        for key in invalidates:
            await self.cache.invalidate(key)

        return MutationResult(ok=True, data=data)
