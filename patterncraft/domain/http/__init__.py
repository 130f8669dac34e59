"""HTTP request bounded context."""

from .request import (
    DEFAULT_BODY,
    DEFAULT_FOLLOW_REDIRECTS,
    DEFAULT_METHOD,
    DEFAULT_TIMEOUT,
    HttpRequest,
    HttpRequestBuilder,
)

__all__ = [
    "HttpRequest",
    "HttpRequestBuilder",
    "DEFAULT_METHOD",
    "DEFAULT_TIMEOUT",
    "DEFAULT_FOLLOW_REDIRECTS",
    "DEFAULT_BODY",
]
