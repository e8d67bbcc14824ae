from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
import logging
from typing import TypeVar, overload

import httpx

from eprints.arxiv.eprints import EprintsService
from eprints.arxiv.errors import InvalidURLError, ResponseReadError
from eprints.arxiv.query import encode_query_string
from eprints.arxiv.types import QueryOptions
from eprints.logging_utils import structured_log
from eprints.settings import settings

T = TypeVar("T")
logger = logging.getLogger(__name__)


class ArxivClient:
    """Communicates with the arXiv export API.

    ``http_client`` is used for every request when given and is never closed
    here; otherwise a short-lived ``httpx.AsyncClient`` is opened per call.
    The base URL is fixed when the client is constructed.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        base_url: str | None = None,
        default_max_results: int | None = None,
        timeout_seconds: float | None = None,
        user_agent: str | None = None,
        mailto: str | None = None,
    ) -> None:
        self._http_client = http_client
        self._base_url = _parse_base_url(base_url or settings.arxiv_base_url)
        self._default_max_results = _resolve_default_max_results(default_max_results)
        self._timeout_seconds = _timeout_seconds(timeout_seconds)
        self._headers = {"User-Agent": _user_agent(user_agent, mailto)}
        self.eprints = EprintsService(self)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def default_max_results(self) -> int:
        return self._default_max_results

    def url(self, route: str, options: QueryOptions | None = None) -> str:
        """Relative URL for an API route with ``options`` encoded as its query string."""
        query = encode_query_string(options, default_max_results=self._default_max_results)
        if not query:
            return route
        return f"{route}?{query}"

    def new_request(self, method: str, url: str) -> httpx.Request:
        """Build a request for ``url`` resolved against the base URL.

        Relative URLs should be given without a leading slash so they land
        under the base path.
        """
        try:
            resolved = self._base_url.join(httpx.URL(url))
        except (httpx.InvalidURL, ValueError) as exc:
            raise InvalidURLError(f"invalid request URL {url!r}: {exc}") from exc
        return httpx.Request(method, resolved, headers=self._headers)

    @overload
    async def do(self, request: httpx.Request, decoder: None = None) -> bytes: ...

    @overload
    async def do(self, request: httpx.Request, decoder: Callable[[bytes], T]) -> T: ...

    async def do(self, request, decoder=None):
        """Send ``request`` and return the body, decoded when ``decoder`` is given.

        The response is closed on every path. Transport failures, non-2xx
        statuses and decoder errors are raised as ``ResponseReadError``.
        """
        uri = _request_uri(request.url)
        structured_log(logger, "debug", "arxiv.request_sent", method=request.method, uri=uri)
        try:
            async with self._session() as http_client:
                response = await http_client.send(request, stream=True)
                try:
                    response.raise_for_status()
                    body = await response.aread()
                finally:
                    await response.aclose()
            structured_log(
                logger,
                "debug",
                "arxiv.response_read",
                method=request.method,
                uri=uri,
                status_code=response.status_code,
                byte_count=len(body),
            )
            if decoder is None:
                return body
            return decoder(body)
        except (httpx.HTTPError, ValueError) as exc:
            structured_log(
                logger,
                "warning",
                "arxiv.response_read_failed",
                method=request.method,
                uri=uri,
                error=str(exc),
            )
            raise ResponseReadError(request.method, uri, exc) from exc

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(
            timeout=self._timeout_seconds,
            follow_redirects=settings.arxiv_follow_redirects,
        ) as client:
            yield client


def _parse_base_url(value: str) -> httpx.URL:
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, ValueError) as exc:
        raise InvalidURLError(f"invalid base URL {value!r}: {exc}") from exc
    if not url.is_absolute_url:
        raise InvalidURLError(f"base URL must be absolute: {value!r}")
    if not url.path.endswith("/"):
        url = url.copy_with(path=f"{url.path}/")
    return url


def _resolve_default_max_results(value: int | None) -> int:
    if value is None:
        value = settings.arxiv_default_max_results
    return max(int(value), 1)


def _timeout_seconds(timeout_seconds: float | None) -> float:
    if timeout_seconds is not None:
        return max(float(timeout_seconds), 0.5)
    return max(float(settings.arxiv_timeout_seconds), 0.5)


def _user_agent(user_agent: str | None, mailto: str | None) -> str:
    agent = user_agent or settings.arxiv_user_agent
    contact = mailto or settings.arxiv_mailto
    if not contact:
        return agent
    return f"{agent} (mailto:{contact})"


def _request_uri(url: httpx.URL) -> str:
    return url.raw_path.decode("ascii")
