"""Shared fixtures: a WordPressClient wired to an in-memory httpx transport."""

from collections.abc import Callable

import httpx
import pytest

from wordpress_rest.client import WordPressClient
from wordpress_rest.config import ClientOptions
from wordpress_rest.restapi.transport import HttpTransport

BASE_URL = "http://host/wp-json/wp/v2"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(sent_requests: list[httpx.Request]):
    """Factory building a client whose requests are answered by ``handler``."""
    clients: list[WordPressClient] = []

    def _make(handler: Handler, **options) -> WordPressClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        client_options = ClientOptions(base_api_url=BASE_URL, **options)
        transport = HttpTransport(
            username=client_options.username,
            password=client_options.password,
            debug=client_options.debug,
            transport=httpx.MockTransport(recording_handler),
        )
        wp = WordPressClient(client_options, transport=transport)
        clients.append(wp)
        return wp

    yield _make

    for wp in clients:
        wp.close()
