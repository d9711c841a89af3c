from __future__ import annotations

import json
from typing import Any, Callable, List, Tuple, Union

import pytest
import requests
from requests.adapters import BaseAdapter

from stripe_payments import ClientConfig, StripeClient

HandlerResult = Union[Tuple[int, Any], Exception]


class StubAdapter(BaseAdapter):
    """Answers every request with ``handler(prepared_request)``."""

    def __init__(self, handler: Callable[[requests.PreparedRequest], HandlerResult]) -> None:
        super().__init__()
        self.handler = handler
        self.requests: List[requests.PreparedRequest] = []
        self.timeouts: List[Any] = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        result = self.handler(request)
        if isinstance(result, Exception):
            raise result
        status, body = result
        if not isinstance(body, (bytes, str)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")

        response = requests.Response()
        response.status_code = status
        response._content = body
        response.headers["Content-Type"] = "application/json"
        response.request = request
        response.url = request.url
        return response

    def close(self) -> None:
        pass


def make_session(handler: Callable[[requests.PreparedRequest], HandlerResult]) -> Tuple[requests.Session, StubAdapter]:
    adapter = StubAdapter(handler)
    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session, adapter


@pytest.fixture()
def config() -> ClientConfig:
    return ClientConfig("sk_test_123")


@pytest.fixture()
def stub():
    """Return a factory building a client whose transport is ``handler``."""

    def factory(handler, *, config: ClientConfig | None = None):
        session, adapter = make_session(handler)
        client = StripeClient(config or ClientConfig("sk_test_123"), session=session)
        return client, adapter

    return factory


@pytest.fixture()
def stub_session():
    """Return ``make_session`` for tests that build their own client."""
    return make_session
