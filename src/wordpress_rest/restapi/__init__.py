"""WordPress REST API plumbing.

Transport, query parameter encoding and the shared response shapes used by
the request pipeline.

Exports:
    HttpTransport: httpx wrapper with basic auth and redirect handling.
    types: Module containing shared Pydantic models and ApiResponse.
    params: Module containing query parameter encoding.
    DEFAULT_TIMEOUT: Default HTTP request timeout.
    MAX_REDIRECTS: Number of redirect hops followed per request.
"""

from . import params, types
from .transport import DEFAULT_TIMEOUT, MAX_REDIRECTS, HttpTransport

__all__ = [
    "DEFAULT_TIMEOUT",
    "MAX_REDIRECTS",
    "HttpTransport",
    "params",
    "types",
]
