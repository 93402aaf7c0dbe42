"""Unit tests for the shared HTTP client manager."""

import asyncio

import httpx

from pocketid_mcp.api.client import decode_base64_payload
from pocketid_mcp.utils.http import HTTPClientManager, get_http_client, http_client_manager


def test_http_client_manager_is_singleton():
    assert HTTPClientManager() is http_client_manager


def test_http_client_manager_caches():
    async def scenario():
        m = HTTPClientManager()
        c1 = await m.get_client()
        c2 = await get_http_client()
        await m.close_all()
        return c1, c2

    c1, c2 = asyncio.run(scenario())
    assert c1 is c2
    assert c1.is_closed


def test_http_client_manager_cache_key_stable_same_values():
    async def scenario():
        m = HTTPClientManager()
        t1 = httpx.Timeout(5.0)
        t2 = httpx.Timeout(5.0)  # distinct object, same values
        c1 = await m.get_client(timeout=t1)
        c2 = await m.get_client(timeout=t2)
        c3 = await m.get_client()
        await m.close_all()
        return c1, c2, c3

    c1, c2, c3 = asyncio.run(scenario())
    assert c1 is c2
    assert c1 is not c3


def test_default_client_has_no_transport_timeout():
    async def scenario():
        client = await get_http_client()
        timeout = client.timeout
        await http_client_manager.close_all()
        return timeout

    timeout = asyncio.run(scenario())
    assert timeout.read is None
    assert timeout.connect is None


def test_decode_base64_ignores_whitespace():
    assert decode_base64_payload("aGVs\nbG8=") == b"hello"
