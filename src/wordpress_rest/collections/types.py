"""Post types collection (read-only, keyed by slug)."""

from ..collection import Entity, ReadOnlyCollection


class PostType(Entity):
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    hierarchical: bool | None = None
    rest_base: str | None = None
    taxonomies: list[str] | None = None


class TypesCollection(ReadOnlyCollection[PostType]):
    entity_type = PostType
    keyed_by_slug = True
