"""Resource collections of the WordPress REST API.

Each module defines the entity model for one resource kind together with
its collection class. Entities that own sub-resources (meta, revisions,
comments) expose accessors that derive those collections from the
collection the entity was decoded from.
"""

from .comments import Comment, CommentsCollection
from .media import Media, MediaCollection
from .meta import Meta, MetaCollection
from .pages import Page, PagesCollection
from .posts import Post, PostsCollection
from .revisions import Revision, RevisionsCollection
from .statuses import Status, StatusesCollection
from .taxonomies import TaxonomiesCollection, Taxonomy
from .terms import Term, TermsCollection
from .types import PostType, TypesCollection
from .users import User, UsersCollection

__all__ = [
    "Comment",
    "CommentsCollection",
    "Media",
    "MediaCollection",
    "Meta",
    "MetaCollection",
    "Page",
    "PagesCollection",
    "Post",
    "PostType",
    "PostsCollection",
    "Revision",
    "RevisionsCollection",
    "Status",
    "StatusesCollection",
    "TaxonomiesCollection",
    "Taxonomy",
    "Term",
    "TermsCollection",
    "TypesCollection",
    "User",
    "UsersCollection",
]
