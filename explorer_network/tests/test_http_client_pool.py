"""Unit tests for the async httpx client pool.

Covers:
- Same key (base_url, purpose) on one loop returns the same instance.
- Different purpose, base_url or event loop yields different instances.
- ``aclose`` only touches the pool's own clients; timeouts and debug hooks.
"""
from __future__ import annotations

import asyncio
import json
import logging

import httpx
import pytest

from explorer_network.base.http import AsyncClientPool
from explorer_network.base.logging import configure_logger, get_logger


def _echo(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"path": request.url.path})


def test_same_key_returns_same_instance():
    pool = AsyncClientPool()

    async def scenario():
        c1 = pool.get("https://xkcd.test/", "main")
        c2 = pool.get("https://xkcd.test/", "main")
        await pool.aclose()
        return c1, c2

    c1, c2 = asyncio.run(scenario())
    assert c1 is c2, "Expected pooled client instances to be identical for same key"


def test_different_purpose_or_base_url_returns_different_instances():
    pool = AsyncClientPool()

    async def scenario():
        clients = (
            pool.get("https://xkcd.test/", "main"),
            pool.get("https://xkcd.test/", "search"),
            pool.get("https://other.test/", "main"),
        )
        await pool.aclose()
        return clients

    c1, c2, c3 = asyncio.run(scenario())
    assert c1 is not c2 and c1 is not c3, "Distinct keys must not share a client"


def test_each_event_loop_gets_its_own_client():
    pool = AsyncClientPool(transport=httpx.MockTransport(_echo))

    async def fetch_once():
        client = pool.get("https://xkcd.test/", "main")
        response = await client.get("info.0.json")
        return client, response.status_code

    first, status1 = asyncio.run(fetch_once())
    second, status2 = asyncio.run(fetch_once())
    assert first is not second  # nosec B101
    assert (status1, status2) == (200, 200)  # nosec B101
    assert len(pool) == 1  # nosec B101 - entry of the closed loop is dropped


def test_get_requires_a_running_loop():
    with pytest.raises(RuntimeError):
        AsyncClientPool().get("https://xkcd.test/", "main")


def test_aclose_closes_only_this_pools_clients():
    mine, theirs = AsyncClientPool(), AsyncClientPool()

    async def scenario():
        a = mine.get("https://xkcd.test/", "main")
        b = theirs.get("https://xkcd.test/", "main")
        await mine.aclose()
        closed = (a.is_closed, b.is_closed)
        replacement = mine.get("https://xkcd.test/", "main")
        await mine.aclose()
        await theirs.aclose()
        return closed, replacement is a

    (a_closed, b_closed), reused = asyncio.run(scenario())
    assert a_closed is True and b_closed is False  # nosec B101
    assert reused is False  # nosec B101


def test_pools_with_different_transports_do_not_share_clients():
    ok = AsyncClientPool(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    missing = AsyncClientPool(transport=httpx.MockTransport(lambda r: httpx.Response(404)))

    async def scenario():
        first = await ok.get("https://xkcd.test/", "main").get("info.0.json")
        second = await missing.get("https://xkcd.test/", "main").get("info.0.json")
        await ok.aclose()
        await missing.aclose()
        return first.status_code, second.status_code

    assert asyncio.run(scenario()) == (200, 404)  # nosec B101


def test_timeout_follows_environment(monkeypatch):
    monkeypatch.setenv("EXPLORER_TIMEOUT_HTTP_SECONDS", "7")
    monkeypatch.setenv("EXPLORER_TIMEOUT_CONNECT_SECONDS", "2")
    pool = AsyncClientPool()

    async def scenario():
        client = pool.get("https://timeouts.test/", "main")
        await pool.aclose()
        return client

    client = asyncio.run(scenario())
    assert client.timeout.read == 7.0  # nosec B101
    assert client.timeout.connect == 2.0  # nosec B101


def test_debug_attaches_logging_hooks():
    plain, debug = AsyncClientPool(), AsyncClientPool(debug=True)

    async def scenario():
        clients = plain.get("https://xkcd.test/", "main"), debug.get("https://xkcd.test/", "main")
        await plain.aclose()
        await debug.aclose()
        return clients

    p, d = asyncio.run(scenario())
    assert p.event_hooks["request"] == []  # nosec B101
    assert len(d.event_hooks["request"]) == 1  # nosec B101
    assert len(d.event_hooks["response"]) == 1  # nosec B101


def test_debug_hooks_log_bounded_body_excerpts(capsys):
    pool = AsyncClientPool(
        debug=True,
        transport=httpx.MockTransport(lambda r: httpx.Response(200, text="r" * 100)),
        body_excerpt_chars=16,
    )
    get_logger()
    configure_logger(level=logging.DEBUG)
    try:

        async def scenario():
            client = pool.get("https://xkcd.test/", "main")
            response = await client.post("upload", content=b"q" * 100)
            await pool.aclose()
            return response

        response = asyncio.run(scenario())
    finally:
        get_logger()

    assert response.text == "r" * 100  # nosec B101 - reading in the hook keeps the body
    events = [json.loads(ln) for ln in capsys.readouterr().err.splitlines() if ln.strip()]
    request = next(e for e in events if e.get("event") == "http.request")
    reply = next(e for e in events if e.get("event") == "http.response")
    assert request["method"] == "POST"  # nosec B101
    assert request["body"] == "q" * 16 + "...[truncated]"  # nosec B101
    assert reply["status"] == 200  # nosec B101
    assert reply["body"] == "r" * 16 + "...[truncated]"  # nosec B101


def test_no_body_logging_without_debug(capsys):
    pool = AsyncClientPool(transport=httpx.MockTransport(_echo))
    get_logger()
    configure_logger(level=logging.DEBUG)
    try:

        async def scenario():
            await pool.get("https://xkcd.test/", "main").get("info.0.json")
            await pool.aclose()

        asyncio.run(scenario())
    finally:
        get_logger()

    assert "http.response" not in capsys.readouterr().err  # nosec B101
