"""Tests for the generic collection model and entity back-references.

Every entity handed out by a collection operation must know where it came
from so that its sub-collections can be derived; entities built by hand
must degrade to "no sub-collection" instead of failing.
"""

import httpx
import pytest
from structlog.testing import capture_logs

from wordpress_rest.collection import CollectionRef
from wordpress_rest.collections.pages import Page
from wordpress_rest.collections.posts import Post
from wordpress_rest.collections.users import User

BASE_URL = "http://host/wp-json/wp/v2"
PAGES_URL = f"{BASE_URL}/pages"


def _pages_handler(request: httpx.Request) -> httpx.Response:
    """Answer every pages request with page 7, or a list of pages 7 and 8."""
    path = request.url.path
    if path.endswith("/pages") and request.method == "GET" and "_method" not in request.url.params:
        return httpx.Response(200, json=[{"id": 7}, {"id": 8}])
    if path.endswith("/revisions"):
        return httpx.Response(200, json=[{"id": 70, "parent": 7}, {"id": 71, "parent": 7}])
    return httpx.Response(200, json={"id": 7, "slug": "about"})


# ---------------------------------------------------------------------------
# Back-references on returned entities
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "operation",
    [
        lambda pages: pages.list().data,
        lambda pages: [pages.get(7).data],
        lambda pages: [pages.create(Page(slug="about")).data],
        lambda pages: [pages.update(7, Page(slug="about")).data],
        lambda pages: [pages.delete(7).data],
    ],
    ids=["list", "get", "create", "update", "delete"],
)
def test_returned_entities_are_bound(make_client, operation):
    """Entities from every collection operation derive sub-collection URLs."""
    pages = make_client(_pages_handler).pages()

    entities = operation(pages)

    assert entities
    for page in entities:
        assert page.collection_url == PAGES_URL
        assert page.revisions().url == f"{PAGES_URL}/{page.id}/revisions"
        assert page.meta().url == f"{PAGES_URL}/{page.id}/meta"


def test_sub_collection_shares_client(make_client):
    """Derived sub-collections use the parent's client."""
    wp = make_client(_pages_handler)

    page = wp.pages().get(7).data

    assert page.revisions().client is wp


def test_error_response_binds_nothing(make_client):
    """A failed request returns no entity and does not raise."""
    pages = make_client(lambda r: httpx.Response(404, json={"code": "x", "message": "y"})).pages()

    response = pages.get(1)

    assert response.data is None
    assert response.error.code == "x"


# ---------------------------------------------------------------------------
# Entities built by hand
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("entity", "accessor"),
    [
        (Page(id=1), "revisions"),
        (Page(id=1), "meta"),
        (Post(id=1), "revisions"),
        (Post(id=1), "meta"),
        (Post(id=1), "comments"),
        (User(id=1), "meta"),
    ],
)
def test_unbound_entity_has_no_sub_collection(entity, accessor):
    """Accessors on an unbound entity return None and log a warning."""
    with capture_logs() as logs:
        result = getattr(entity, accessor)()

    assert result is None
    assert entity.collection_url is None
    assert logs[0]["log_level"] == "warning"
    assert logs[0]["sub_collection"] == accessor


def test_bind_sets_back_reference(make_client):
    """bind attaches a back-reference to a hand-built entity."""
    wp = make_client(_pages_handler)
    page = Page(id=3)

    page.bind(CollectionRef(wp, PAGES_URL))

    assert page.revisions().url == f"{PAGES_URL}/3/revisions"


# ---------------------------------------------------------------------------
# Lazy navigation vs. the entity() shortcut
# ---------------------------------------------------------------------------


def test_entity_shortcut_matches_fetched_parent_url(make_client):
    """pages.entity(id) and a fetched page derive the same sub-collection URL."""
    pages = make_client(_pages_handler).pages()

    fetched = pages.get(7).data
    stub = pages.entity(7)

    assert stub.id == 7
    assert stub.revisions().url == fetched.revisions().url
    assert stub.meta().url == fetched.meta().url


def test_entity_shortcut_matches_fetched_parent_results(make_client, sent_requests):
    """Both navigation paths send the same request and decode the same data."""
    pages = make_client(_pages_handler).pages()
    fetched = pages.get(7).data
    sent_requests.clear()

    via_fetched = fetched.revisions().list()
    via_stub = pages.entity(7).revisions().list()

    assert via_fetched.data == via_stub.data
    assert [str(r.url) for r in sent_requests] == [
        f"{PAGES_URL}/7/revisions",
        f"{PAGES_URL}/7/revisions",
    ]


def test_entity_shortcut_sends_no_request(make_client, sent_requests):
    """Building the stub and its sub-collection is free of network traffic."""
    pages = make_client(_pages_handler).pages()

    pages.entity(7).revisions()

    assert sent_requests == []


def test_collection_repr():
    from wordpress_rest.collections.pages import PagesCollection

    assert repr(PagesCollection(None, PAGES_URL)) == f"PagesCollection(url='{PAGES_URL}')"
