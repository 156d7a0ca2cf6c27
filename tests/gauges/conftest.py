import pytest
import httpx
from unittest.mock import MagicMock

from gauges_connector.core.httpx_client import HTTPClient
from gauges_connector.gauges.api_client import GaugesClient
from gauges_connector.gauges.request_builder import GAUGES_URL


class RecordingTransport(httpx.MockTransport):
    """Transport httpx qui garde chaque requête envoyée et répond avec un statut fixe."""

    def __init__(self, status_code: int = 200, json_body=None):
        self.requests = []
        self.status_code = status_code
        self.json_body = json_body if json_body is not None else {}
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def mock_logger():
    """Logger factice: seul debug() est utilisé."""
    return MagicMock()


@pytest.fixture
def gauges_client(transport):
    """GaugesClient sans logger, branché sur le transport d'enregistrement."""
    http_client = HTTPClient(base_url=GAUGES_URL, transport=transport)
    with GaugesClient(token="test_token", http_client=http_client) as client:
        yield client


@pytest.fixture
def make_transport():
    """Factory de RecordingTransport pour un statut donné."""
    return RecordingTransport
