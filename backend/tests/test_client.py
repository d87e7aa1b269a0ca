import httpx
import pytest

from fleet.web.client import DriversClient, QueryCache


def _counting_transport(calls):
    rows = [{"id": 1, "name": "Ana Maria"}]

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.method, request.url.path))
        if request.method == "GET":
            return httpx.Response(200, json=rows)
        if request.method == "POST":
            return httpx.Response(201, json={"id": 2})
        if request.method == "PUT" and request.url.path == "/drivers/9":
            return httpx.Response(404, json={"detail": "Driver not found"})
        return httpx.Response(204)

    return httpx.MockTransport(handler)


@pytest.fixture
def calls():
    return []


@pytest.fixture
async def client(calls):
    http = httpx.AsyncClient(transport=_counting_transport(calls), base_url="http://api")
    c = DriversClient(http, QueryCache(ttl_seconds=60))
    yield c
    await c.aclose()


async def test_list_is_cached(client, calls):
    await client.list()
    await client.list()
    assert calls == [("GET", "/drivers")]


async def test_each_mutation_invalidates_list(client, calls):
    await client.list()
    await client.create({"name": "Bia Lima"})
    await client.list()
    await client.update({"id": 1, "name": "Bia Lima"})
    await client.list()
    await client.remove(1)
    await client.list()
    assert [c for c in calls if c == ("GET", "/drivers")] == [("GET", "/drivers")] * 4
    assert ("PUT", "/drivers/1") in calls
    assert ("DELETE", "/drivers/1") in calls


async def test_failed_mutation_raises_and_keeps_cache(client, calls):
    await client.list()
    with pytest.raises(httpx.HTTPStatusError):
        await client.update({"id": 9})
    await client.list()
    assert calls.count(("GET", "/drivers")) == 1


def test_cache_expires():
    cache = QueryCache(ttl_seconds=-1)
    cache.put("drivers", [1])
    assert cache.get("drivers") is None


async def test_get_is_not_cached(client, calls):
    await client.get(1)
    await client.get(1)
    assert calls == [("GET", "/drivers/1"), ("GET", "/drivers/1")]
