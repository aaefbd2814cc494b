"""Pages collection with its meta and revisions sub-collections."""

from ..collection import META, REVISIONS, Collection, Entity
from ..restapi.types import RenderedText
from .meta import MetaCollection
from .revisions import RevisionsCollection


class Page(Entity):
    """A static page. Pages are hierarchical and ordered."""

    date: str | None = None
    date_gmt: str | None = None
    guid: RenderedText | None = None
    link: str | None = None
    modified: str | None = None
    modified_gmt: str | None = None
    password: str | None = None
    slug: str | None = None
    status: str | None = None
    type: str | None = None
    parent: int | None = None
    title: RenderedText | None = None
    content: RenderedText | None = None
    excerpt: RenderedText | None = None
    author: int | None = None
    featured_media: int | None = None
    comment_status: str | None = None
    ping_status: str | None = None
    menu_order: int | None = None
    template: str | None = None

    def meta(self) -> MetaCollection | None:
        """Metadata of this page, or None if the page is unbound."""
        return self._sub_collection(MetaCollection, META)

    def revisions(self) -> RevisionsCollection | None:
        """Revisions of this page, or None if the page is unbound."""
        return self._sub_collection(RevisionsCollection, REVISIONS)


class PagesCollection(Collection[Page]):
    entity_type = Page
    delete_result = Page
