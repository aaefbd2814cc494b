"""Metadata attached to users, posts and pages."""

from typing import Any

from ..collection import Collection, Entity


class Meta(Entity):
    """One metadata key/value pair."""

    key: str | None = None
    value: Any = None


class MetaCollection(Collection[Meta]):
    """Metadata of one parent entity, at ``{parent}/{id}/meta``."""

    entity_type = Meta
    # Deleting meta answers with a status message rather than the entry
    delete_result = dict[str, Any]
