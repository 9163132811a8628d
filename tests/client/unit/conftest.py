from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from giftharmony.client.api import GiftHarmonyClient
from giftharmony.client.session import TokenSession
from giftharmony.client.storage import InMemoryStorage

BASE_URL = "http://shop.test/api"


class RecordingHandler:
    """MockTransport handler that records requests and answers each with a fresh canned response."""

    def __init__(self, status_code: int, **response_kwargs: Any) -> None:
        self.status_code = status_code
        self.response_kwargs = response_kwargs
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, **self.response_kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def make_client(storage: InMemoryStorage):
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> GiftHarmonyClient:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return GiftHarmonyClient(base_url=BASE_URL, session=TokenSession(storage), http_client=http_client)

    return factory


@pytest.fixture
def recording_handler() -> type[RecordingHandler]:
    return RecordingHandler
