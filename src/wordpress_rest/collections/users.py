"""Users collection and user metadata."""

from typing import Any

from ..collection import META, Collection, Entity
from ..restapi.params import QueryParams
from ..restapi.types import ApiResponse, AvatarURLs
from .meta import MetaCollection


class User(Entity):
    """A WordPress user.

    ``password`` is write-only: it is sent on create/update and never
    returned by the API.
    """

    avatar_url: str | None = None
    avatar_urls: AvatarURLs | None = None
    capabilities: dict[str, Any] | None = None
    description: str | None = None
    email: str | None = None
    extra_capabilities: dict[str, Any] | None = None
    first_name: str | None = None
    last_name: str | None = None
    link: str | None = None
    name: str | None = None
    nickname: str | None = None
    registered_date: str | None = None
    roles: list[str] | None = None
    slug: str | None = None
    url: str | None = None
    username: str | None = None
    password: str | None = None

    def meta(self) -> MetaCollection | None:
        """Metadata of this user, or None if the user is unbound."""
        return self._sub_collection(MetaCollection, META)


class UsersCollection(Collection[User]):
    entity_type = User
    delete_result = User

    def me(self, params: QueryParams = None) -> ApiResponse[User]:
        """Fetch the user the client is authenticated as."""
        response = self.client.get(f"{self.url}/me", params, User)
        self._bind(response.data)
        return response
