"""End-to-end tests for pages and their revisions."""

import httpx

from wordpress_rest.collections.pages import Page
from wordpress_rest.collections.revisions import Revision

PAGES_URL = "http://host/wp-json/wp/v2/pages"

PAGE = {
    "id": 7,
    "slug": "about",
    "status": "publish",
    "type": "page",
    "parent": 0,
    "menu_order": 2,
    "title": {"rendered": "About"},
    "content": {"rendered": "<p>Hi</p>", "protected": False},
}


def test_list_pages(make_client, sent_requests):
    """list() GETs the pages URL and decodes an array of Page entities."""
    pages = make_client(lambda r: httpx.Response(200, json=[PAGE])).pages()

    response = pages.list()

    request = sent_requests[0]
    assert request.method == "GET"
    assert str(request.url) == PAGES_URL
    assert request.headers["Accept"] == "application/json"
    assert len(response.data) == 1
    page = response.data[0]
    assert isinstance(page, Page)
    assert page.title.rendered == "About"
    assert page.menu_order == 2


def test_revisions_delete_decodes_boolean(make_client, sent_requests):
    """Deleting a revision uses the override GET and decodes a bare boolean."""
    pages = make_client(lambda r: httpx.Response(200, json=True)).pages()

    response = pages.entity(7).revisions().delete(42)

    request = sent_requests[0]
    assert request.method == "GET"
    assert str(request.url) == f"{PAGES_URL}/7/revisions/42?_method=DELETE"
    assert request.headers["X-HTTP-Method-Override"] == "DELETE"
    assert response.data is True


def test_revisions_delete_forced(make_client, sent_requests):
    """Forced deletion passes force=true ahead of the method marker."""
    pages = make_client(lambda r: httpx.Response(200, json=True)).pages()

    pages.entity(7).revisions().delete(42, {"force": True})

    assert str(sent_requests[0].url) == f"{PAGES_URL}/7/revisions/42?force=true&_method=DELETE"


def test_revisions_get_via_fetched_page(make_client, sent_requests):
    """A fetched page reaches its revisions without refetching itself."""

    def handler(request: httpx.Request) -> httpx.Response:
        if "/revisions/" in request.url.path:
            return httpx.Response(
                200,
                json={"id": 42, "parent": 7, "author": "1", "title": {"rendered": "Old"}},
            )
        return httpx.Response(200, json=PAGE)

    pages = make_client(handler).pages()

    page = pages.get(7).data
    revision = page.revisions().get(42).data

    assert isinstance(revision, Revision)
    assert revision.parent == 7
    assert revision.author == "1"
    assert revision.collection_url == f"{PAGES_URL}/7/revisions"
    assert len(sent_requests) == 2


def test_update_page(make_client, sent_requests):
    """update() overrides to PUT and returns the echoed page."""
    pages = make_client(lambda r: httpx.Response(200, json={**PAGE, "menu_order": 5})).pages()

    response = pages.update(7, Page(menu_order=5))

    assert sent_requests[0].headers["X-HTTP-Method-Override"] == "PUT"
    assert sent_requests[0].content == b'{"menu_order":5}'
    assert response.data.menu_order == 5


def test_delete_page_echoes_entity(make_client):
    """Deleting a page decodes the echoed page."""
    pages = make_client(lambda r: httpx.Response(200, json=PAGE)).pages()

    response = pages.delete(7, {"force": True})

    assert isinstance(response.data, Page)
    assert response.data.revisions() is not None
