import asyncio

from highfive.client.query_cache import QueryCache, QueryStatus


async def settle():
    for _ in range(5):
        await asyncio.sleep(0)


def counting_fetcher(results):
    """Fetcher returning successive items of ``results`` (raising exceptions)"""
    calls = []

    async def fetch():
        value = results[min(len(calls), len(results) - 1)]
        calls.append(value)
        if isinstance(value, Exception):
            raise value
        return value

    return fetch, calls


def test_new_key_passes_through_loading_before_loaded():
    async def scenario():
        cache = QueryCache()
        fetch, _ = counting_fetcher([["a"]])
        seen = []

        first = cache.query(("team",), fetch)
        cache.subscribe(("team",), fetch, lambda r: seen.append(r.status))
        await settle()

        return first, seen, cache.peek(("team",))

    first, seen, final = asyncio.run(scenario())

    assert first.is_loading
    assert first.data is None
    assert seen == [QueryStatus.LOADING, QueryStatus.SUCCESS]
    assert final.data == ["a"]


def test_concurrent_subscribers_share_one_fetch():
    async def scenario():
        cache = QueryCache()
        fetch, calls = counting_fetcher([["a"]])
        results_a, results_b = [], []

        cache.subscribe(("services",), fetch, results_a.append)
        cache.subscribe(("services",), fetch, results_b.append)
        cache.query(("services",), fetch)
        await cache.fetch(("services",), fetch)

        return calls, results_a[-1], results_b[-1]

    calls, last_a, last_b = asyncio.run(scenario())

    assert len(calls) == 1
    assert last_a.data == last_b.data == ["a"]


def test_cached_result_served_without_refetch():
    async def scenario():
        cache = QueryCache()
        fetch, calls = counting_fetcher([["a"]])
        await cache.fetch(("team",), fetch)
        again = cache.query(("team",), fetch)
        return calls, again

    calls, again = asyncio.run(scenario())

    assert len(calls) == 1
    assert again.is_success
    assert not again.is_fetching


def test_failed_refetch_keeps_previous_data():
    async def scenario():
        cache = QueryCache()
        fetch, _ = counting_fetcher([["a"], RuntimeError("boom")])
        seen = []
        cache.subscribe(("projects",), fetch, seen.append)
        await settle()
        await cache.invalidate(("projects",))
        return seen[-1]

    result = asyncio.run(scenario())

    assert result.is_error
    assert str(result.error) == "boom"
    assert result.data == ["a"]


def test_first_fetch_failure_is_error_without_data():
    async def scenario():
        cache = QueryCache()
        fetch, _ = counting_fetcher([RuntimeError("down")])
        return await cache.fetch(("activity",), fetch)

    result = asyncio.run(scenario())

    assert result.is_error
    assert result.data is None


def test_slow_older_fetch_cannot_overwrite_newer_result():
    async def scenario():
        cache = QueryCache()
        release_first = asyncio.Event()
        calls = []

        async def fetch():
            calls.append(len(calls) + 1)
            if len(calls) == 1:
                await release_first.wait()
                return ["stale"]
            return ["fresh"]

        seen = []
        cache.subscribe(("activity",), fetch, seen.append)
        await settle()  # first fetch is now waiting

        await cache.invalidate(("activity",))
        after_second = cache.peek(("activity",)).data

        release_first.set()
        await settle()

        return after_second, cache.peek(("activity",)), [r.data for r in seen]

    after_second, final, seen_data = asyncio.run(scenario())

    assert after_second == ["fresh"]
    assert final.data == ["fresh"]
    assert not final.is_fetching
    assert ["stale"] not in seen_data


def test_invalidate_matches_key_prefix_and_only_refetches_subscribed():
    async def scenario():
        cache = QueryCache()
        partners, partner_calls = counting_fetcher([["p1"], ["p1", "p2"]])
        collabs, collab_calls = counting_fetcher([["c1"], ["c1", "c2"]])
        team, team_calls = counting_fetcher([["t1"], ["t1", "t2"]])

        cache.subscribe(("network", "partners"), partners, lambda r: None)
        await cache.fetch(("network", "collaborations"), collabs)
        cache.subscribe(("team",), team, lambda r: None)
        await settle()

        await cache.invalidate(("network",))

        return (
            len(partner_calls), len(collab_calls), len(team_calls),
            cache.peek(("network", "partners")),
            cache.peek(("network", "collaborations")),
        )

    partner_n, collab_n, team_n, partners, collabs = asyncio.run(scenario())

    assert partner_n == 2
    assert partners.data == ["p1", "p2"]
    # unsubscribed entry is only marked stale
    assert collab_n == 1
    assert collabs.is_stale
    assert collabs.data == ["c1"]
    assert team_n == 1


def test_stale_entry_refetches_on_next_read():
    async def scenario():
        cache = QueryCache()
        fetch, calls = counting_fetcher([["a"], ["a", "b"]])
        await cache.fetch(("team",), fetch)
        await cache.invalidate(("team",))
        during = cache.query(("team",), fetch)
        after = await cache.fetch(("team",), fetch)
        return during, after, calls

    during, after, calls = asyncio.run(scenario())

    # old data stays visible while revalidating
    assert during.data == ["a"]
    assert during.is_fetching
    assert after.data == ["a", "b"]
    assert len(calls) == 2


def test_unsubscribed_listener_is_not_notified_but_result_is_cached():
    async def scenario():
        cache = QueryCache()
        gate = asyncio.Event()

        async def fetch():
            await gate.wait()
            return ["done"]

        seen = []
        subscription = cache.subscribe(("events",), fetch, seen.append)
        subscription.unsubscribe()
        gate.set()
        await settle()
        return seen, cache.peek(("events",))

    seen, entry = asyncio.run(scenario())

    assert len(seen) == 1
    assert seen[0].is_loading
    assert entry.data == ["done"]


def test_clear_drops_all_entries():
    async def scenario():
        cache = QueryCache()
        fetch, _ = counting_fetcher([["a"]])
        await cache.fetch(("team",), fetch)
        cache.clear()
        return cache.peek(("team",)), cache.keys()

    entry, keys = asyncio.run(scenario())

    assert entry is None
    assert keys == []
