# patterncraft/domain/http/request.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from patterncraft.domain.core.copying import frozen_mapping
from patterncraft.domain.core.exceptions import MissingRequiredFieldError, OutOfRangeError
from patterncraft.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_METHOD = "GET"
DEFAULT_TIMEOUT = 30
DEFAULT_FOLLOW_REDIRECTS = True
DEFAULT_BODY = ""

# Marks builder fields that were never set, as opposed to explicitly set to None.
_UNSET: Any = object()


@dataclass(frozen=True)
class HttpRequest:
    """Immutable HTTP request with validation.

    ``headers`` is stored as a read-only private copy, so neither the caller
    that supplied it nor a reader of the attribute can change the request
    after construction.
    """

    url: str
    method: str = DEFAULT_METHOD
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = DEFAULT_BODY
    timeout: int = DEFAULT_TIMEOUT
    follow_redirects: bool = DEFAULT_FOLLOW_REDIRECTS

    def __post_init__(self):
        if self.url is None:
            raise MissingRequiredFieldError("url")
        if self.method is None:
            raise MissingRequiredFieldError("method")
        if self.timeout is None:
            raise MissingRequiredFieldError("timeout")
        if self.timeout < 0:
            raise OutOfRangeError("timeout", self.timeout, ">= 0")
        object.__setattr__(self, "headers", frozen_mapping(self.headers))

    def __hash__(self) -> int:
        return hash(
            (
                self.url,
                self.method,
                frozenset(self.headers.items()),
                self.body,
                self.timeout,
                self.follow_redirects,
            )
        )

    def __reduce__(self):
        # Copies and unpickled instances go back through validation.
        return (
            HttpRequest,
            (
                self.url,
                self.method,
                dict(self.headers),
                self.body,
                self.timeout,
                self.follow_redirects,
            ),
        )

    @staticmethod
    def builder() -> HttpRequestBuilder:
        return HttpRequestBuilder()

    def clone(self) -> HttpRequest:
        """Return an equal request that shares no container storage with this one."""
        return self._derive()

    def with_url(self, url: str) -> HttpRequest:
        return self._derive(url=url)

    def with_method(self, method: str) -> HttpRequest:
        return self._derive(method=method)

    def with_headers(self, headers: Mapping[str, str]) -> HttpRequest:
        """Return a copy whose headers are replaced by ``headers``."""
        return self._derive(headers=headers)

    def with_header(self, name: str, value: str) -> HttpRequest:
        """Return a copy with one header added or overwritten."""
        headers = dict(self.headers)
        headers[name] = value
        return self._derive(headers=headers)

    def with_body(self, body: str) -> HttpRequest:
        return self._derive(body=body)

    def with_timeout(self, timeout: int) -> HttpRequest:
        return self._derive(timeout=timeout)

    def with_follow_redirects(self, follow_redirects: bool) -> HttpRequest:
        return self._derive(follow_redirects=follow_redirects)

    def _derive(self, **changes: Any) -> HttpRequest:
        values: Dict[str, Any] = {
            "url": self.url,
            "method": self.method,
            "headers": dict(self.headers),
            "body": self.body,
            "timeout": self.timeout,
            "follow_redirects": self.follow_redirects,
        }
        values.update(changes)
        return HttpRequest(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "method": self.method,
            "headers": dict(self.headers),
            "body": self.body,
            "timeout": self.timeout,
            "follow_redirects": self.follow_redirects,
        }


class HttpRequestBuilder:
    """
    Mutable staging area for :class:`HttpRequest`.

    Setters store values without validating them and return the builder so
    calls can be chained. ``build()`` may be called any number of times; each
    call snapshots the state at that moment and leaves the builder intact.
    Builders are not thread-safe.
    """

    def __init__(self):
        self._url: Optional[str] = None
        self._method: Any = _UNSET
        self._headers: Dict[str, str] = {}
        self._body: Any = _UNSET
        self._timeout: Any = _UNSET
        self._follow_redirects: Any = _UNSET

    def url(self, url: Optional[str]) -> HttpRequestBuilder:
        self._url = url
        return self

    def method(self, method: Optional[str]) -> HttpRequestBuilder:
        self._method = method
        return self

    def header(self, name: str, value: str) -> HttpRequestBuilder:
        self._headers[name] = value
        return self

    def headers(self, headers: Mapping[str, str]) -> HttpRequestBuilder:
        for name, value in headers.items():
            self._headers[name] = value
        return self

    def body(self, body: str) -> HttpRequestBuilder:
        self._body = body
        return self

    def timeout(self, timeout: int) -> HttpRequestBuilder:
        self._timeout = timeout
        return self

    def follow_redirects(self, follow: bool) -> HttpRequestBuilder:
        self._follow_redirects = follow
        return self

    def build(self) -> HttpRequest:
        """Validate the staged values and return a new request.

        Raises:
            MissingRequiredFieldError: url, method or timeout is absent.
            OutOfRangeError: timeout is negative.
        """
        request = HttpRequest(
            url=self._url,
            method=_or_default(self._method, DEFAULT_METHOD),
            headers=dict(self._headers),
            body=_or_default(self._body, DEFAULT_BODY),
            timeout=_or_default(self._timeout, DEFAULT_TIMEOUT),
            follow_redirects=_or_default(self._follow_redirects, DEFAULT_FOLLOW_REDIRECTS),
        )
        logger.debug(
            "Built HTTP request",
            url=request.url,
            method=request.method,
            header_count=len(request.headers),
        )
        return request


def _or_default(value: Any, default: Any) -> Any:
    return default if value is _UNSET else value
