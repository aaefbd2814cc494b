"""Comments collection."""

from ..collection import Collection, Entity
from ..restapi.types import AvatarURLs, RenderedText


class Comment(Entity):
    """A comment on a post."""

    author: int | None = None
    author_avatar_urls: AvatarURLs | None = None
    author_email: str | None = None
    author_ip: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    author_user_agent: str | None = None
    content: RenderedText | None = None
    date: str | None = None
    date_gmt: str | None = None
    karma: int | None = None
    link: str | None = None
    parent: int | None = None
    post: int | None = None
    status: str | None = None
    type: str | None = None


class CommentsCollection(Collection[Comment]):
    entity_type = Comment
    delete_result = Comment
