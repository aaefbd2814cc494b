"""Query parameter encoding.

Callers may pass query parameters in three shapes:

- an already-encoded query string, sent unchanged;
- a mapping, flattened so that list values become repeated keys;
- a pydantic model, dumped to a mapping and flattened the same way.
"""

from collections.abc import Mapping
from typing import Any, TypeAlias

import httpx
from pydantic import BaseModel, ConfigDict

QueryParams: TypeAlias = str | Mapping[str, Any] | BaseModel | None


class ListParams(BaseModel):
    """Common arguments accepted by collection listing endpoints.

    Extra keyword arguments are kept and sent as-is, since each endpoint
    accepts its own filters.
    """

    model_config = ConfigDict(extra="allow")

    context: str | None = None
    page: int | None = None
    per_page: int | None = None
    search: str | None = None
    include: list[int] | None = None
    exclude: list[int] | None = None
    order: str | None = None
    orderby: str | None = None
    slug: list[str] | None = None
    status: list[str] | None = None
    author: list[int] | None = None
    parent: list[int] | None = None


class DeleteParams(BaseModel):
    """Arguments accepted by delete endpoints."""

    model_config = ConfigDict(extra="allow")

    force: bool | None = None
    # Users only: ID of the user that receives the deleted user's posts
    reassign: int | None = None


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_params(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten a mapping into ordered query pairs.

    List and tuple values produce one pair per element under the same key.
    None values are skipped.

    Args:
        params: Mapping of parameter name to value.

    Returns:
        List of (key, value) string pairs in mapping order.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _stringify(item)) for item in value if item is not None)
        else:
            pairs.append((key, _stringify(value)))
    return pairs


def encode_query(params: QueryParams) -> str:
    """Encode any supported parameter shape into a query string.

    Args:
        params: Encoded string, mapping, pydantic model, or None.

    Returns:
        Query string without a leading ``?``; empty when there is nothing
        to send.

    Raises:
        TypeError: If params is of an unsupported type.
    """
    if params is None:
        return ""
    if isinstance(params, str):
        return params
    if isinstance(params, BaseModel):
        params = params.model_dump(mode="json", exclude_none=True, by_alias=True)
    if not isinstance(params, Mapping):
        msg = f"Unsupported query parameter type: {type(params).__name__}"
        raise TypeError(msg)
    return str(httpx.QueryParams(flatten_params(params)))


def add_query(url: str, query: str) -> str:
    """Append a query string to a URL that may already carry one."""
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"
