"""Taxonomy terms collection."""

from ..collection import Collection, Entity


class Term(Entity):
    """A term (category, tag, ...) of a taxonomy."""

    count: int | None = None
    description: str | None = None
    link: str | None = None
    name: str | None = None
    slug: str | None = None
    taxonomy: str | None = None
    parent: int | None = None


class TermsCollection(Collection[Term]):
    entity_type = Term
    delete_result = Term
