"""WordPress REST Client.

Typed client for the WordPress REST API (wp/v2) that maps posts, pages,
users, media, comments, revisions, taxonomies and terms onto Pydantic
models, with lazy navigation into per-entity sub-collections.
"""

__version__ = "0.1.0"
