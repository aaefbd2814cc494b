"""Generic collection and entity model.

A collection is a handle on one REST endpoint. Entities decoded from a
collection keep a back-reference to where they came from (the client and
the collection URL), which lets them derive sub-collections such as
``/pages/7/revisions`` without another round trip.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

import pydantic
import structlog

from .restapi.params import QueryParams
from .restapi.types import ApiResponse

if TYPE_CHECKING:
    from .client import WordPressClient

logger = structlog.get_logger(__name__)

USERS = "users"
POSTS = "posts"
PAGES = "pages"
MEDIA = "media"
META = "meta"
REVISIONS = "revisions"
COMMENTS = "comments"
TAXONOMIES = "taxonomies"
TERMS = "terms"
STATUSES = "statuses"
TYPES = "types"


@dataclass(frozen=True)
class CollectionRef:
    """Location of the collection an entity was decoded from.

    Holds the shared client and the collection URL, not the collection
    object itself.
    """

    client: "WordPressClient"
    url: str


class Entity(pydantic.BaseModel):
    """Base class for decoded resources."""

    id: int | None = None

    _collection: CollectionRef | None = pydantic.PrivateAttr(default=None)

    def bind(self, ref: CollectionRef) -> None:
        """Attach the back-reference to the producing collection."""
        self._collection = ref

    @property
    def collection_url(self) -> str | None:
        """URL of the producing collection, None for unbound entities."""
        return self._collection.url if self._collection is not None else None

    def _sub_collection(self, collection_class: type["C"], name: str) -> "C | None":
        if self._collection is None:
            # Entity was built by hand rather than returned by a collection
            logger.warning(
                "Entity has no parent collection",
                entity=type(self).__name__,
                sub_collection=name,
            )
            return None
        return collection_class(
            self._collection.client,
            f"{self._collection.url}/{self.id}/{name}",
        )


T = TypeVar("T", bound=Entity)


class ReadOnlyCollection(Generic[T]):
    """Collection supporting list and get.

    Subclasses set ``entity_type`` to the entity model they decode, and
    ``delete_result`` to the shape the endpoint returns on delete.
    ``keyed_by_slug`` marks endpoints that list their entities as a JSON
    object keyed by slug rather than an array; those entities are also
    addressed by slug.
    """

    entity_type: ClassVar[type[Entity]]
    delete_result: ClassVar[Any] = None
    keyed_by_slug: ClassVar[bool] = False

    def __init__(self, client: "WordPressClient", url: str):
        self.client = client
        self.url = url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r})"

    @property
    def ref(self) -> CollectionRef:
        """Back-reference handed to entities decoded by this collection."""
        return CollectionRef(self.client, self.url)

    def _bind(self, data: Any) -> Any:
        if isinstance(data, Entity):
            data.bind(self.ref)
        elif isinstance(data, list):
            for item in data:
                if isinstance(item, Entity):
                    item.bind(self.ref)
        return data

    def entity(self, entity_id: int | str) -> T:
        """Return a bound stub entity without fetching it.

        Useful for reaching a sub-collection directly, e.g.
        ``client.pages().entity(7).revisions()``. On slug-keyed collections
        the key is stored as the stub's ``slug``.
        """
        if self.keyed_by_slug:
            stub = self.entity_type(slug=entity_id)
        else:
            stub = self.entity_type(id=entity_id)
        stub.bind(self.ref)
        return stub

    def get(self, entity_id: int | str, params: QueryParams = None) -> ApiResponse[T]:
        """Fetch one entity from ``{url}/{entity_id}``."""
        response = self.client.get(
            f"{self.url}/{entity_id}",
            params,
            self.entity_type,
        )
        self._bind(response.data)
        return response

    def _delete(self, entity_id: int | str, params: QueryParams) -> ApiResponse[Any]:
        response = self.client.delete(
            f"{self.url}/{entity_id}",
            params,
            self.delete_result,
        )
        self._bind(response.data)
        return response

    def list(self, params: QueryParams = None) -> ApiResponse[list[T]]:
        """Fetch the entities of this collection.

        Slug-keyed bodies are flattened into a list in server order.
        """
        if self.keyed_by_slug:
            response = self.client.list(self.url, params, dict[str, self.entity_type])
            if response.data is not None:
                response.data = list(response.data.values())
        else:
            response = self.client.list(self.url, params, list[self.entity_type])
        self._bind(response.data)
        return response


class Collection(ReadOnlyCollection[T]):
    """Collection supporting list, get, create, update and delete."""

    def create(self, entity: T | dict[str, Any] | None) -> ApiResponse[T]:
        """Create an entity.

        The returned entity carries the server-assigned fields.
        """
        response = self.client.create(self.url, entity, self.entity_type)
        self._bind(response.data)
        return response

    def update(
        self,
        entity_id: int,
        entity: T | dict[str, Any] | None,
    ) -> ApiResponse[T]:
        """Update the entity at ``{url}/{entity_id}``."""
        response = self.client.update(
            f"{self.url}/{entity_id}",
            entity,
            self.entity_type,
        )
        self._bind(response.data)
        return response

    def delete(self, entity_id: int, params: QueryParams = None) -> ApiResponse[Any]:
        """Delete the entity at ``{url}/{entity_id}``.

        The result is decoded as this collection's ``delete_result``.
        """
        return self._delete(entity_id, params)


C = TypeVar("C", bound=ReadOnlyCollection)
