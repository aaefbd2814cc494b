"""Taxonomies collection (read-only, keyed by slug)."""

from ..collection import Entity, ReadOnlyCollection


class Taxonomy(Entity):
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    types: list[str] | None = None
    hierarchical: bool | None = None
    rest_base: str | None = None
    show_cloud: bool | None = None


class TaxonomiesCollection(ReadOnlyCollection[Taxonomy]):
    entity_type = Taxonomy
    keyed_by_slug = True
