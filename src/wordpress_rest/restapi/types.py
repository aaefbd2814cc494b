"""Shared response shapes for the WordPress REST API.

Pydantic models for the small structures that several resource kinds embed,
the error payload returned by the API, and the result wrapper every
request operation returns.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class RenderedText(BaseModel):
    """Text field the API returns both raw and rendered as HTML."""

    rendered: str | None = None
    raw: str | None = None


class AvatarURLs(BaseModel):
    """Avatar URLs keyed by pixel size."""

    model_config = ConfigDict(populate_by_name=True)

    size_24: str | None = Field(None, alias="24")
    size_48: str | None = Field(None, alias="48")
    size_96: str | None = Field(None, alias="96")


class GeneralError(BaseModel):
    """Error payload returned with non-2xx responses.

    ``data`` means different things on different endpoints (a status code,
    an object with a ``status`` key, or nothing), so it is kept untyped.
    """

    code: str = ""
    message: str = ""
    data: Any = None


@dataclass
class ApiResponse(Generic[T]):
    """Outcome of one request.

    ``data`` is the decoded body for 2xx responses. For any other status it
    is None and ``error`` holds the decoded error payload, if the body had
    that shape.
    """

    data: T | None
    status_code: int
    headers: httpx.Headers
    body: bytes
    error: GeneralError | None = None

    @property
    def ok(self) -> bool:
        """Whether the response status is 2xx."""
        return 200 <= self.status_code < 300  # noqa: PLR2004
