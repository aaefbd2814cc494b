"""Revisions of posts and pages.

Only reachable as a sub-collection, e.g. ``page.revisions()``.
"""

from typing import Any

from ..collection import Entity, ReadOnlyCollection
from ..restapi.params import QueryParams
from ..restapi.types import ApiResponse, RenderedText


class Revision(Entity):
    """A stored revision of a post or page."""

    # Some WordPress versions return the author ID as a string
    author: int | str | None = None
    date: str | None = None
    date_gmt: str | None = None
    guid: RenderedText | None = None
    modified: str | None = None
    modified_gmt: str | None = None
    parent: int | None = None
    slug: str | None = None
    title: RenderedText | None = None
    content: RenderedText | None = None
    excerpt: RenderedText | None = None


class RevisionsCollection(ReadOnlyCollection[Revision]):
    """Revisions of one post or page.

    Revisions cannot be created or updated. Deleting one answers with a
    bare boolean instead of the deleted entity.
    """

    entity_type = Revision
    delete_result = bool

    def delete(self, entity_id: int, params: QueryParams = None) -> ApiResponse[Any]:
        """Delete a revision.

        WordPress refuses to trash revisions, so callers normally pass
        ``force=true``.
        """
        return self._delete(entity_id, params)
