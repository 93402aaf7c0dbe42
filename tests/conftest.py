import sys
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pocketid_mcp.api import PocketIdClient, reset_pocketid_client, set_pocketid_client  # noqa: E402
from pocketid_mcp.config.settings import EndpointConfig, get_settings  # noqa: E402

BASE_URL = "https://id.example.com"
API_KEY = "test-api-key"

Route = Union[httpx.Response, Callable[[httpx.Request], object]]


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    # Add custom markers for test organization
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


class FakePocketId:
    """In-process Pocket ID served through ``httpx.MockTransport``.

    ``/healthz`` answers ``health_status``; other requests are matched
    on ``(method, decoded path)`` and fall back to a 404.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.health_status = 200
        self.health_route: Union[Route, None] = None

    def add(self, method: str, path: str, response: Route) -> None:
        self.routes[(method, path)] = response

    def handler(self, request: httpx.Request):
        self.requests.append(request)
        if request.url.path == "/healthz":
            if self.health_route is not None:
                return self._dispatch(self.health_route, request)
            return httpx.Response(self.health_status, text="OK")
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="not found")
        return self._dispatch(route, request)

    @staticmethod
    def _dispatch(route: Route, request: httpx.Request):
        if isinstance(route, httpx.Response):
            return route
        return route(request)

    @property
    def health_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/healthz"]

    @property
    def api_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path != "/healthz"]

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def client(self, **kwargs) -> PocketIdClient:
        return PocketIdClient(
            EndpointConfig(BASE_URL, API_KEY), http_client=self.http_client(), **kwargs
        )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set the environment read by Settings and reset cached singletons.

    Every test starts with a fresh settings instance and no default
    Pocket ID client, so nothing leaks between tests.
    """
    monkeypatch.setenv("POCKETID_URL", BASE_URL)
    monkeypatch.setenv("POCKETID_API_KEY", API_KEY)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("MCP_SERVER_NAME", "pocketid-test")

    get_settings.cache_clear()
    reset_pocketid_client()
    yield
    get_settings.cache_clear()
    reset_pocketid_client()


@pytest.fixture
def endpoint():
    """Configured endpoint matching the fake instance."""
    return EndpointConfig(BASE_URL, API_KEY)


@pytest.fixture
def fake_pocketid():
    """A fresh fake Pocket ID instance."""
    return FakePocketId()


@pytest.fixture
def pocketid_client(fake_pocketid):
    """Default client wired to the fake instance.

    Installed as the process-wide client so the verb facade, the
    resource catalogue and the tools all reach the fake.
    """
    client = fake_pocketid.client()
    set_pocketid_client(client)
    return client
