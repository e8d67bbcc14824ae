from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from eprints.arxiv.client import ArxivClient

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_client() -> Callable[..., ArxivClient]:
    def _make(handler: Handler, **kwargs) -> ArxivClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ArxivClient(http_client, **kwargs)

    return _make


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def feed_handler(recorded_requests: list[httpx.Request]) -> Callable[..., Handler]:
    def _handler_for(payload: str, status_code: int = 200) -> Handler:
        def _handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return httpx.Response(status_code, text=payload)

        return _handler

    return _handler_for
