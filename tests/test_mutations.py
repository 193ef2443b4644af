import asyncio

from highfive.client.errors import NetworkFailure
from highfive.client.mutations import MutationExecutor
from highfive.client.query_cache import QueryCache


def test_success_invalidates_and_waits_for_refetch():
    async def scenario():
        cache = QueryCache()
        store = ["a"]

        async def fetch():
            return list(store)

        async def create():
            store.append("b")
            return "b"

        seen = []
        cache.subscribe(("activity",), fetch, seen.append)
        await cache.fetch(("activity",), fetch)

        result = await MutationExecutor(cache).mutate(create, invalidates=[("activity",)])
        return result, cache.peek(("activity",)), seen[-1]

    result, entry, last_seen = asyncio.run(scenario())

    assert result.ok
    assert result.data == "b"
    assert entry.data == ["a", "b"]
    assert last_seen.data == ["a", "b"]


def test_failure_reports_error_and_skips_invalidation():
    async def scenario():
        cache = QueryCache()
        fetches = []

        async def fetch():
            fetches.append(1)
            return ["a"]

        async def create():
            raise NetworkFailure("Server said 500", status_code=500)

        cache.subscribe(("activity",), fetch, lambda r: None)
        await cache.fetch(("activity",), fetch)

        result = await MutationExecutor(cache).mutate(create, invalidates=[("activity",)])
        return result, len(fetches), cache.peek(("activity",))

    result, fetch_count, entry = asyncio.run(scenario())

    assert not result.ok
    assert result.error.status_code == 500
    assert fetch_count == 1
    assert not entry.is_stale


def test_operation_runs_exactly_once():
    async def scenario():
        calls = []

        async def flaky():
            calls.append(1)
            raise NetworkFailure("timeout")

        await MutationExecutor(QueryCache()).mutate(flaky)
        return calls

    assert asyncio.run(scenario()) == [1]
