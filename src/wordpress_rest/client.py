"""WordPress REST API client.

Provides the request pipeline shared by every collection (query encoding,
method overrides, body encoding, response decoding) and one accessor per
top-level resource collection.
"""

import functools
import json
from typing import Any

import pydantic
import structlog

from . import collection
from .collections.comments import CommentsCollection
from .collections.media import MediaCollection
from .collections.pages import PagesCollection
from .collections.posts import PostsCollection
from .collections.statuses import StatusesCollection
from .collections.taxonomies import TaxonomiesCollection
from .collections.terms import TermsCollection
from .collections.types import TypesCollection
from .collections.users import UsersCollection
from .config import ClientOptions, DeleteMethod, configure_logging, load_options
from .restapi.params import QueryParams, add_query, encode_query
from .restapi.transport import HttpTransport
from .restapi.types import ApiResponse, GeneralError

logger = structlog.get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"
METHOD_OVERRIDE_HEADER = "X-HTTP-Method-Override"


class ResponseDecodeError(Exception):
    """Raised when a successful response body cannot be decoded."""

    def __init__(self, message: str, status_code: int, body: bytes):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


@functools.cache
def _adapter(result_type: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(result_type)


def encode_body(content: Any) -> bytes:
    """Encode a request body as JSON.

    Pydantic models are dumped by alias with unset (None) fields omitted.
    None encodes as JSON ``null``.
    """
    if isinstance(content, pydantic.BaseModel):
        return content.model_dump_json(exclude_none=True, by_alias=True).encode()
    return json.dumps(content).encode()


def _decode_error(body: bytes) -> GeneralError | None:
    try:
        error = GeneralError.model_validate_json(body)
    except pydantic.ValidationError:
        logger.debug("Error response is not a JSON error object")
        return None
    return error


class WordPressClient:
    """Client for the WordPress REST API.

    Collections returned by the accessors share this client and its
    transport. Can be used as a context manager for automatic cleanup.
    """

    def __init__(
        self,
        options: ClientOptions,
        transport: HttpTransport | None = None,
    ):
        """Initialize the client.

        Args:
            options: Validated client options.
            transport: Optional transport, built from options when omitted.
        """
        self.options = options
        self.base_url = options.base_api_url
        self._transport = transport or HttpTransport(
            username=options.username,
            password=options.password,
            timeout=options.timeout,
            debug=options.debug,
        )

    @classmethod
    def from_config(cls, config_path: str | None = None) -> "WordPressClient":
        """Build a client from a JSON config file and configure logging."""
        options = load_options(config_path)
        configure_logging(options.log_level, options.log_format)
        logger.info("Created WordPress client", base_url=options.base_api_url)
        return cls(options)

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Close the underlying transport."""
        self._transport.close()

    def _collection_url(self, name: str) -> str:
        return f"{self.base_url}/{name}"

    def users(self) -> UsersCollection:
        return UsersCollection(self, self._collection_url(collection.USERS))

    def posts(self) -> PostsCollection:
        return PostsCollection(self, self._collection_url(collection.POSTS))

    def pages(self) -> PagesCollection:
        return PagesCollection(self, self._collection_url(collection.PAGES))

    def media(self) -> MediaCollection:
        return MediaCollection(self, self._collection_url(collection.MEDIA))

    def comments(self) -> CommentsCollection:
        return CommentsCollection(self, self._collection_url(collection.COMMENTS))

    def taxonomies(self) -> TaxonomiesCollection:
        return TaxonomiesCollection(self, self._collection_url(collection.TAXONOMIES))

    def terms(self) -> TermsCollection:
        return TermsCollection(self, self._collection_url(collection.TERMS))

    def statuses(self) -> StatusesCollection:
        return StatusesCollection(self, self._collection_url(collection.STATUSES))

    def types(self) -> TypesCollection:
        return TypesCollection(self, self._collection_url(collection.TYPES))

    def _perform(
        self,
        method: str,
        url: str,
        result_type: Any,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> ApiResponse[Any]:
        """Send one request and decode its response.

        Args:
            method: HTTP method.
            url: Absolute URL, query string included.
            result_type: Type the body of a 2xx response is validated into.
            headers: Extra request headers.
            content: Raw request body.

        Returns:
            ApiResponse with decoded data, or the decoded error payload for
            non-2xx responses.

        Raises:
            httpx.HTTPError: If the HTTP exchange fails.
            ResponseDecodeError: If a 2xx body is not valid JSON or does not
                match result_type.
        """
        request_headers = {"Accept": JSON_CONTENT_TYPE}
        if headers:
            request_headers.update(headers)

        response = self._transport.send(
            method,
            url,
            headers=request_headers,
            content=content,
        )
        body = response.content

        if not response.is_success:
            return ApiResponse(
                data=None,
                status_code=response.status_code,
                headers=response.headers,
                body=body,
                error=_decode_error(body),
            )

        data = None
        if body.strip():
            content_type = response.headers.get("Content-Type", "")
            if content_type and "json" not in content_type:
                msg = f"Unexpected content type {content_type!r} from {url}"
                raise ResponseDecodeError(msg, response.status_code, body)
            try:
                data = _adapter(result_type).validate_json(body)
            except pydantic.ValidationError as exc:
                msg = f"Failed to decode response from {url}: {exc}"
                raise ResponseDecodeError(msg, response.status_code, body) from exc

        return ApiResponse(
            data=data,
            status_code=response.status_code,
            headers=response.headers,
            body=body,
        )

    def get(self, url: str, params: QueryParams, result_type: Any) -> ApiResponse[Any]:
        """GET an entity, with params encoded into the query string."""
        return self._perform("GET", add_query(url, encode_query(params)), result_type)

    def create(self, url: str, content: Any, result_type: Any) -> ApiResponse[Any]:
        """POST content as JSON."""
        return self._perform(
            "POST",
            url,
            result_type,
            headers={"Content-Type": JSON_CONTENT_TYPE},
            content=encode_body(content),
        )

    def update(self, url: str, content: Any, result_type: Any) -> ApiResponse[Any]:
        """POST content as JSON, marked as a PUT through the override header."""
        return self._perform(
            "POST",
            url,
            result_type,
            headers={
                "Content-Type": JSON_CONTENT_TYPE,
                METHOD_OVERRIDE_HEADER: "PUT",
            },
            content=encode_body(content),
        )

    def delete(self, url: str, params: QueryParams, result_type: Any) -> ApiResponse[Any]:
        """Delete an entity.

        With the default override strategy this is a GET carrying
        ``_method=DELETE`` after the caller's params and an
        ``X-HTTP-Method-Override: DELETE`` header.
        """
        query = encode_query(params)
        if self.options.delete_method is DeleteMethod.NATIVE:
            return self._perform("DELETE", add_query(url, query), result_type)

        query = f"{query}&_method=DELETE" if query else "_method=DELETE"
        return self._perform(
            "GET",
            add_query(url, query),
            result_type,
            headers={METHOD_OVERRIDE_HEADER: "DELETE"},
        )

    def post_data(
        self,
        url: str,
        content: bytes,
        content_type: str,
        filename: str | None,
        result_type: Any,
    ) -> ApiResponse[Any]:
        """POST a raw single-part body, e.g. a media file."""
        headers = {"Content-Type": content_type}
        if filename:
            headers["Content-Disposition"] = f'attachment; filename="{filename}"'
        return self._perform("POST", url, result_type, headers=headers, content=content)

    def list(self, url: str, params: QueryParams, result_type: Any) -> ApiResponse[Any]:
        """GET a collection, with params encoded into the query string."""
        return self._perform("GET", add_query(url, encode_query(params)), result_type)
