"""Media library collection."""

from typing import Any

from ..collection import Collection, Entity
from ..restapi.types import ApiResponse, RenderedText


class Media(Entity):
    """An attachment in the media library."""

    date: str | None = None
    date_gmt: str | None = None
    guid: RenderedText | None = None
    link: str | None = None
    modified: str | None = None
    modified_gmt: str | None = None
    slug: str | None = None
    status: str | None = None
    type: str | None = None
    title: RenderedText | None = None
    author: int | None = None
    comment_status: str | None = None
    ping_status: str | None = None
    alt_text: str | None = None
    caption: RenderedText | None = None
    description: RenderedText | None = None
    media_type: str | None = None
    mime_type: str | None = None
    media_details: dict[str, Any] | None = None
    post: int | None = None
    source_url: str | None = None


class MediaCollection(Collection[Media]):
    entity_type = Media
    delete_result = Media

    def upload(
        self,
        content: bytes,
        content_type: str,
        filename: str | None = None,
    ) -> ApiResponse[Media]:
        """Upload a file as the raw request body.

        Args:
            content: File bytes.
            content_type: MIME type of the file, e.g. ``image/png``.
            filename: Name sent in the ``Content-Disposition`` header.

        Returns:
            ApiResponse with the created media entity.
        """
        response = self.client.post_data(
            self.url,
            content,
            content_type,
            filename,
            Media,
        )
        self._bind(response.data)
        return response
