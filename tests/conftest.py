from datetime import datetime, timezone

import httpx
import pytest
from notion_client import Client

from notion_records import RecordForwarder
from settings import GatewayConfig
from webapp import create_app


class FakePages:
    def __init__(self):
        self.calls = []
        self.error = None
        self.page_id = "page-123"

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"object": "page", "id": self.page_id}


class FakeNotion:
    def __init__(self):
        self.pages = FakePages()


def notion_answering(status, code=None, text=None):
    """A real notion Client whose HTTP layer answers every request with one response.

    Returns the client and the list of requests it received.
    """
    requests = []

    def handler(request):
        requests.append(request)
        if code is not None:
            return httpx.Response(status, json={
                "object": "error", "status": status, "code": code,
                "message": "upstream said no",
            })
        return httpx.Response(status, text=text or "")

    client = Client(auth="secret", client=httpx.Client(transport=httpx.MockTransport(handler)))
    return client, requests


def notion_raising(exc):
    def handler(request):
        raise exc

    return Client(auth="secret", client=httpx.Client(transport=httpx.MockTransport(handler)))


@pytest.fixture
def notion():
    return FakeNotion()


@pytest.fixture
def config():
    return GatewayConfig(
        notion_token="secret",
        notion_database_id="db-1",
        allowed_domains=frozenset({"localhost", "gpus.example.com"}),
    )


@pytest.fixture
def make_client(config):
    def make(notion_client):
        forwarder = RecordForwarder(notion_client, config.notion_database_id,
                                    config.property_names)
        return create_app(config, forwarder=forwarder).test_client()

    return make


@pytest.fixture
def client(make_client, notion):
    return make_client(notion)


@pytest.fixture
def form():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "gpuType": "H100",
        "quantity": "4",
        "message": "ASAP please",
    }


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 17, 12, 30, tzinfo=timezone.utc)
