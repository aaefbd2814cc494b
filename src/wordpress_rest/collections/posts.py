"""Posts collection with its meta, revisions and comments sub-collections."""

from ..collection import COMMENTS, META, REVISIONS, Collection, Entity
from ..restapi.types import RenderedText
from .comments import CommentsCollection
from .meta import MetaCollection
from .revisions import RevisionsCollection


class Post(Entity):
    """A blog post."""

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
    title: RenderedText | None = None
    content: RenderedText | None = None
    excerpt: RenderedText | None = None
    author: int | None = None
    featured_media: int | None = None
    comment_status: str | None = None
    ping_status: str | None = None
    sticky: bool | None = None
    template: str | None = None
    format: str | None = None
    categories: list[int] | None = None
    tags: list[int] | None = None

    def meta(self) -> MetaCollection | None:
        """Metadata of this post, or None if the post is unbound."""
        return self._sub_collection(MetaCollection, META)

    def revisions(self) -> RevisionsCollection | None:
        """Revisions of this post, or None if the post is unbound."""
        return self._sub_collection(RevisionsCollection, REVISIONS)

    def comments(self) -> CommentsCollection | None:
        """Comments on this post, or None if the post is unbound."""
        return self._sub_collection(CommentsCollection, COMMENTS)


class PostsCollection(Collection[Post]):
    entity_type = Post
    delete_result = Post
