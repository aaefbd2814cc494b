"""Post statuses collection (read-only, keyed by slug)."""

from ..collection import Entity, ReadOnlyCollection


class Status(Entity):
    name: str | None = None
    slug: str | None = None
    public: bool | None = None
    private: bool | None = None
    protected: bool | None = None
    queryable: bool | None = None
    show_in_list: bool | None = None
    date_floating: bool | None = None


class StatusesCollection(ReadOnlyCollection[Status]):
    entity_type = Status
    keyed_by_slug = True
