"""
Query Cache
Keyed store of collection results with stale-while-revalidate refetching
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

QueryKey = Tuple[str, ...]
Fetcher = Callable[[], Awaitable[Any]]
Listener = Callable[["QueryResult"], None]


class QueryStatus(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class QueryResult:
    """Snapshot of one cache entry"""
    status: QueryStatus
    data: Any = None
    error: Optional[BaseException] = None
    is_fetching: bool = False
    is_stale: bool = False

    @property
    def is_loading(self) -> bool:
        return self.status is QueryStatus.LOADING

    @property
    def is_error(self) -> bool:
        return self.status is QueryStatus.ERROR

    @property
    def is_success(self) -> bool:
        return self.status is QueryStatus.SUCCESS


class _Entry:
    def __init__(self, fetcher: Fetcher):
        self.fetcher = fetcher
        self.status = QueryStatus.LOADING
        self.data: Any = None
        self.error: Optional[BaseException] = None
        self.stale = True
        # Last generation issued / last generation whose result was applied
        self.generation = 0
        self.applied = 0
        self.task: Optional[asyncio.Task] = None
        self.listeners: List[Listener] = []

    def snapshot(self) -> QueryResult:
        return QueryResult(
            status=self.status,
            data=self.data,
            error=self.error,
            is_fetching=self.task is not None,
            is_stale=self.stale,
        )


class Subscription:
    """Handle returned by QueryCache.subscribe"""

    def __init__(self, cache: "QueryCache", key: QueryKey, listener: Listener):
        self._cache = cache
        self.key = key
        self._listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        self._cache._remove_listener(self.key, self._listener)


def _matches(key: QueryKey, prefix: QueryKey) -> bool:
    return key[:len(prefix)] == tuple(prefix)


class QueryCache:
    """
    Process-wide query cache.

    Every entry walks LOADING -> SUCCESS | ERROR. A failed refetch keeps the
    last good data next to the error. Each fetch of a key gets the next
    generation number; a result older than the newest applied one is dropped,
    so a slow stale request can never overwrite a fresher result.

    All methods must be called from the event loop thread; fetches run as
    tasks on the running loop.
    """

    def __init__(self):
        self._entries: Dict[QueryKey, _Entry] = {}

    def _entry(self, key: QueryKey, fetcher: Fetcher) -> _Entry:
        key = tuple(key)
        entry = self._entries.get(key)
        if entry is None:
            entry = _Entry(fetcher)
            self._entries[key] = entry
        else:
            entry.fetcher = fetcher
        return entry

    def _start(self, key: QueryKey, entry: _Entry) -> asyncio.Task:
        entry.generation += 1
        generation = entry.generation
        entry.task = asyncio.get_running_loop().create_task(
            self._run(key, entry, generation, entry.fetcher)
        )
        return entry.task

    async def _run(self, key: QueryKey, entry: _Entry, generation: int, fetcher: Fetcher) -> None:
        try:
            data = await fetcher()
        except Exception as e:
            logger.warning("Query %s failed: %s", key, e)
            self._settle(key, entry, generation, error=e)
        else:
            self._settle(key, entry, generation, data=data)

    def _settle(self, key, entry: _Entry, generation: int, data: Any = None, error: Optional[BaseException] = None) -> None:
        if generation == entry.generation:
            entry.task = None

        if generation < entry.applied:
            logger.debug("Discarding result of generation %s for %s", generation, key)
            return
        entry.applied = generation

        if error is not None:
            entry.status = QueryStatus.ERROR
            entry.error = error
        else:
            entry.status = QueryStatus.SUCCESS
            entry.data = data
            entry.error = None
            entry.stale = generation < entry.generation

        self._notify(entry)

    def _notify(self, entry: _Entry) -> None:
        result = entry.snapshot()
        for listener in list(entry.listeners):
            listener(result)

    def _remove_listener(self, key: QueryKey, listener: Listener) -> None:
        entry = self._entries.get(tuple(key))
        if entry and listener in entry.listeners:
            entry.listeners.remove(listener)

    def query(self, key: QueryKey, fetcher: Fetcher) -> QueryResult:
        """
        Current state of ``key``, starting a fetch when the entry is new or stale

        Concurrent callers share the in-flight fetch.
        """
        entry = self._entry(key, fetcher)
        if entry.stale and entry.task is None:
            self._start(tuple(key), entry)
        return entry.snapshot()

    def subscribe(self, key: QueryKey, fetcher: Fetcher, listener: Listener) -> Subscription:
        """
        Observe ``key``; the listener is called now and on every change

        Unsubscribing does not cancel a fetch already in flight.
        """
        result = self.query(key, fetcher)
        self._entries[tuple(key)].listeners.append(listener)
        listener(result)
        return Subscription(self, tuple(key), listener)

    async def fetch(self, key: QueryKey, fetcher: Fetcher) -> QueryResult:
        """Wait for the entry's current (or a new) fetch and return the settled state"""
        entry = self._entry(key, fetcher)
        if entry.stale and entry.task is None:
            self._start(tuple(key), entry)
        while entry.task is not None:
            await asyncio.shield(entry.task)
        return entry.snapshot()

    def peek(self, key: QueryKey) -> Optional[QueryResult]:
        entry = self._entries.get(tuple(key))
        return entry.snapshot() if entry else None

    async def invalidate(self, prefix: QueryKey) -> None:
        """
        Mark every entry under ``prefix`` stale

        Entries with subscribers refetch right away and this waits for those
        fetches; the others refetch on their next read. Displayed data is kept
        until the refetch lands.
        """
        tasks = []
        for key, entry in list(self._entries.items()):
            if not _matches(key, prefix):
                continue
            entry.stale = True
            if entry.listeners:
                tasks.append(self._start(key, entry))
                self._notify(entry)

        if tasks:
            await asyncio.gather(*tasks)

    def clear(self) -> None:
        """Drop every entry (on logout)"""
        self._entries.clear()

    def keys(self) -> List[QueryKey]:
        return list(self._entries.keys())
