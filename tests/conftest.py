import sys
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ddragon_client import DDragonClient  # noqa: E402

BASE_URL = "http://ddragon.test/cdn/6.24.1/data/en_US/champion"


class FeedStub:
    """Transporte httpx que responde con un JSON fijo y registra las URLs pedidas."""

    def __init__(self, payload=None, status=200, text=None, exc=None):
        self.payload = payload
        self.status = status
        self.text = text
        self.exc = exc
        self.urls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.urls.append(str(request.url))
        if self.exc is not None:
            raise self.exc(f"stub {self.exc.__name__}", request=request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.payload)

    def client(self) -> DDragonClient:
        return DDragonClient(base_url=BASE_URL, timeout=5, transport=httpx.MockTransport(self))


@pytest.fixture
def feed():
    return FeedStub(payload={"data": {"Ahri": {"id": "Ahri", "lore": "The Nine-Tailed Fox"}}})
