"""Unit tests for the availability gate.

Covers health check de-duplication, memoized success, reset on failure and
configuration checks.
"""

import asyncio

import httpx
import pytest

from pocketid_mcp.config.settings import EndpointConfig
from pocketid_mcp.exceptions import ConfigurationError, HealthCheckError
from pocketid_mcp.utils.http import AvailabilityGate, AvailabilityState


def make_gate(fake, endpoint, **kwargs):
    http_client = fake.http_client()

    async def provider():
        return http_client

    return AvailabilityGate(endpoint, client_provider=provider, **kwargs)


def slow_health(status=200, delay=0.05):
    async def route(request):
        await asyncio.sleep(delay)
        return httpx.Response(status, text="OK")

    return route


@pytest.mark.asyncio
async def test_success_is_memoized(fake_pocketid, endpoint):
    gate = make_gate(fake_pocketid, endpoint)
    assert gate.state is AvailabilityState.UNCHECKED

    await gate.ensure_available()
    await gate.ensure_available()

    assert gate.state is AvailabilityState.AVAILABLE
    assert len(fake_pocketid.health_requests) == 1


@pytest.mark.asyncio
async def test_health_check_sends_api_key(fake_pocketid, endpoint):
    gate = make_gate(fake_pocketid, endpoint)
    await gate.ensure_available()

    check = fake_pocketid.health_requests[0]
    assert check.method == "GET"
    assert str(check.url) == "https://id.example.com/healthz"
    assert check.headers["X-API-KEY"] == "test-api-key"


@pytest.mark.asyncio
async def test_concurrent_callers_share_one_health_check(fake_pocketid, endpoint):
    fake_pocketid.health_route = slow_health()
    gate = make_gate(fake_pocketid, endpoint)

    await asyncio.gather(*(gate.ensure_available() for _ in range(5)))

    assert len(fake_pocketid.health_requests) == 1
    assert gate.state is AvailabilityState.AVAILABLE


@pytest.mark.asyncio
async def test_concurrent_callers_all_see_failure(fake_pocketid, endpoint):
    fake_pocketid.health_route = slow_health(status=503)
    gate = make_gate(fake_pocketid, endpoint)

    results = await asyncio.gather(
        *(gate.ensure_available() for _ in range(3)), return_exceptions=True
    )

    assert len(fake_pocketid.health_requests) == 1
    assert all(isinstance(r, HealthCheckError) for r in results)
    assert gate.state is AvailabilityState.UNCHECKED


@pytest.mark.asyncio
async def test_failure_resets_and_next_call_checks_again(fake_pocketid, endpoint):
    fake_pocketid.health_status = 503
    gate = make_gate(fake_pocketid, endpoint)

    with pytest.raises(HealthCheckError) as excinfo:
        await gate.ensure_available()
    assert excinfo.value.status_code == 503
    assert "503" in str(excinfo.value)
    assert gate.state is AvailabilityState.UNCHECKED

    fake_pocketid.health_status = 200
    await gate.ensure_available()

    assert gate.state is AvailabilityState.AVAILABLE
    assert len(fake_pocketid.health_requests) == 2


@pytest.mark.asyncio
async def test_health_body_is_not_interpreted(fake_pocketid, endpoint):
    fake_pocketid.health_route = httpx.Response(
        200, content=b"not json", headers={"Content-Type": "application/json"}
    )
    gate = make_gate(fake_pocketid, endpoint)

    await gate.ensure_available()
    assert gate.state is AvailabilityState.AVAILABLE


@pytest.mark.asyncio
async def test_health_check_timeout(fake_pocketid, endpoint):
    fake_pocketid.health_route = slow_health(delay=1.0)
    gate = make_gate(fake_pocketid, endpoint, timeout=0.05)

    with pytest.raises(HealthCheckError, match="timed out"):
        await gate.ensure_available()
    assert gate.state is AvailabilityState.UNCHECKED


@pytest.mark.asyncio
async def test_transport_error_becomes_health_check_error(fake_pocketid, endpoint):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    fake_pocketid.health_route = refuse
    gate = make_gate(fake_pocketid, endpoint)

    with pytest.raises(HealthCheckError, match="connection refused"):
        await gate.ensure_available()


@pytest.mark.asyncio
async def test_missing_url_is_configuration_error(fake_pocketid):
    gate = make_gate(fake_pocketid, EndpointConfig("", "key"))

    with pytest.raises(ConfigurationError) as excinfo:
        await gate.ensure_available()

    assert excinfo.value.setting == "POCKETID_URL"
    assert fake_pocketid.requests == []
    assert gate.state is AvailabilityState.UNCHECKED


@pytest.mark.asyncio
async def test_missing_api_key_is_configuration_error(fake_pocketid):
    gate = make_gate(fake_pocketid, EndpointConfig("https://id.example.com", ""))

    with pytest.raises(ConfigurationError, match="POCKETID_API_KEY"):
        await gate.ensure_available()
    assert fake_pocketid.requests == []


@pytest.mark.asyncio
async def test_cancelled_waiter_does_not_cancel_shared_health_check(fake_pocketid, endpoint):
    fake_pocketid.health_route = slow_health(delay=0.05)
    gate = make_gate(fake_pocketid, endpoint)

    first = asyncio.create_task(gate.ensure_available())
    await asyncio.sleep(0.01)
    assert gate.state is AvailabilityState.CHECKING
    first.cancel()

    await gate.ensure_available()

    with pytest.raises(asyncio.CancelledError):
        await first
    assert gate.state is AvailabilityState.AVAILABLE
    assert len(fake_pocketid.health_requests) == 1


@pytest.mark.asyncio
async def test_reset_forgets_success(fake_pocketid, endpoint):
    gate = make_gate(fake_pocketid, endpoint)
    await gate.ensure_available()

    gate.reset()
    assert gate.state is AvailabilityState.UNCHECKED

    await gate.ensure_available()
    assert len(fake_pocketid.health_requests) == 2
